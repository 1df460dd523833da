from .bullets import generate_bullet_suggestions
from .gaps import generate_gap_suggestions

__all__ = ["generate_bullet_suggestions", "generate_gap_suggestions"]
