"""CJK-aware text-object selection and repeat movement for modal editors."""

from .app import bootstrap, configure_logging, load_settings
from .core import CharClassifier, Direction, IncludeSyntax, IncludeSyntaxTable, Span, Thing
from .editor.buffer import TextBuffer
from .editor.document_model import MarkRequest, RepeatRequest, Selection, SelectionKind
from .errors import (
    BehaviorNotRegisteredError,
    CjkMotionError,
    InvalidIncludeSyntaxError,
    SegmenterUnavailableError,
)
from .integration import Behavior, CjkMotionMode, OverrideHandle, OverrideRegistry
from .motion import CjkMotion, RepeatMovementEngine, StrategyDispatcher
from .segmentation import SegmentSource, TokenizerSegmentSource, locate
from .services import Settings, SettingsStore

__version__ = "0.1.0"

__all__ = [
    "Behavior",
    "BehaviorNotRegisteredError",
    "CharClassifier",
    "CjkMotion",
    "CjkMotionError",
    "CjkMotionMode",
    "Direction",
    "IncludeSyntax",
    "IncludeSyntaxTable",
    "InvalidIncludeSyntaxError",
    "MarkRequest",
    "OverrideHandle",
    "OverrideRegistry",
    "RepeatMovementEngine",
    "RepeatRequest",
    "SegmentSource",
    "SegmenterUnavailableError",
    "Selection",
    "SelectionKind",
    "Settings",
    "SettingsStore",
    "Span",
    "StrategyDispatcher",
    "TextBuffer",
    "Thing",
    "TokenizerSegmentSource",
    "__version__",
    "bootstrap",
    "configure_logging",
    "locate",
    "load_settings",
]
