from schemelet.evaluation.evaluator import Evaluator

__all__ = ["Evaluator"]
