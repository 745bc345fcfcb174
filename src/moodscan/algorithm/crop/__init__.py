from moodscan.algorithm.crop.normalizer import CropNormalizer, DEFAULT_CROP_SCALE

__all__ = ["CropNormalizer", "DEFAULT_CROP_SCALE"]
