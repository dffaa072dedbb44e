"""ToolBank Configuration Module.

Environment-driven settings (loaded from ``.env`` via python-dotenv) and the
fixed conversion constants shared by the calculators.
"""
from toolbank.config import settings

__all__ = ["settings"]
