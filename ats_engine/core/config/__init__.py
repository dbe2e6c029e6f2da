from .scoring import get_scoring_config, get_scoring_float, get_scoring_value

__all__ = ["get_scoring_config", "get_scoring_float", "get_scoring_value"]
