from api.routes.progress import ProgressController

__all__ = ["ProgressController"]
