from moodscan.algorithm.face_gate.gate import FaceGate, FaceGateConfig

__all__ = ["FaceGate", "FaceGateConfig"]
