from .status import PROMPT, TITLE, render_status

__all__ = ["PROMPT", "TITLE", "render_status"]
