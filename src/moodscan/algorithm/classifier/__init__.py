from moodscan.algorithm.classifier.adapter import EmotionClassifier, load_classifier

__all__ = ["EmotionClassifier", "load_classifier"]
