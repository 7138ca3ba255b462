from .dashboard import DashboardView, build_dashboard, progress_series, readiness_score
from .effects import Effect, ShowQuestion, ShowResults, ShowSelection
from .sink import EffectRecorder, PresentationSink

__all__ = [
    "DashboardView",
    "build_dashboard",
    "progress_series",
    "readiness_score",
    "Effect",
    "ShowQuestion",
    "ShowResults",
    "ShowSelection",
    "EffectRecorder",
    "PresentationSink",
]
