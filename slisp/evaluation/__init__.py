from slisp.evaluation.evaluator import evaluate

__all__ = ["evaluate"]
