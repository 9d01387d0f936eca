"""Entry points installed in place of the host's mark/next-thing behaviors."""

from __future__ import annotations

import logging

from ..core.charclass import CharClassifier
from ..core.things import IncludeSyntaxTable, Thing
from ..editor.document_model import MarkRequest, Selection
from ..editor.host import EditorHost, ThingStepper
from ..segmentation.source import SegmentSource, TokenizerSegmentSource
from ..services.settings import Settings
from .builder import SelectionBuilder
from .repeat import RepeatMovementEngine
from .steppers import CjkWordStepper, GenericThingStepper
from .strategies import CjkSegmentStrategy, GenericThingStrategy, StrategyDispatcher

LOGGER = logging.getLogger(__name__)

WORD_BOUNDARY_FORMAT = r"\b{}\b"


class CjkMotion:
    """CJK-aware ``mark_thing`` / ``next_thing`` bound to one editor host."""

    def __init__(
        self,
        host: EditorHost,
        source: SegmentSource,
        *,
        classifier: CharClassifier | None = None,
        include_syntax: IncludeSyntaxTable | None = None,
        cjk_word_motion: bool = True,
    ) -> None:
        self.host = host
        self.source = source
        self.classifier = classifier or CharClassifier()
        self.builder = SelectionBuilder(host)
        self.dispatcher = StrategyDispatcher(
            classifier=self.classifier,
            cjk=CjkSegmentStrategy(host, self.builder, source),
            generic=GenericThingStrategy(host, self.builder),
        )
        steppers: dict[Thing, ThingStepper] = {}
        if cjk_word_motion:
            steppers[Thing.WORD] = CjkWordStepper(host, source)
        self.engine = RepeatMovementEngine(
            host,
            builder=self.builder,
            steppers=steppers,
            default_stepper=GenericThingStepper(host),
            include_syntax=include_syntax,
        )

    @classmethod
    def from_settings(
        cls,
        host: EditorHost,
        settings: Settings,
        *,
        source: SegmentSource | None = None,
    ) -> "CjkMotion":
        classifier = CharClassifier(settings.cjk_pattern)
        if source is None:
            source = TokenizerSegmentSource(settings.segmenter, classifier=classifier)
        return cls(
            host,
            source,
            classifier=classifier,
            include_syntax=settings.include_syntax_table(),
            cjk_word_motion=settings.cjk_word_motion,
        )

    def mark_thing(
        self,
        thing: Thing,
        type: Thing,
        backward: bool = False,
        regexp_format: str | None = None,
    ) -> Selection | None:
        """Select the ``thing`` at point, using CJK segments where they apply."""

        request = MarkRequest(thing=thing, mode_tag=type, backward=backward, regexp_format=regexp_format)
        strategy = self.dispatcher.dispatch(self.host.char_at(self.host.point), type)
        LOGGER.debug("mark_thing %s via %s strategy", thing.value, strategy.name)
        return strategy.select(request)

    def next_thing(
        self,
        thing: Thing,
        type: Thing,
        n: int,
        include_syntax: str | None = None,
    ) -> Selection | None:
        return self.engine.next_thing(thing, type, n, include_syntax)

    def mark_word(self, n: int = 1) -> Selection | None:
        return self.mark_thing(Thing.WORD, Thing.WORD, n < 0, WORD_BOUNDARY_FORMAT)

    def mark_symbol(self, n: int = 1) -> Selection | None:
        return self.mark_thing(Thing.SYMBOL, Thing.SYMBOL, n < 0, WORD_BOUNDARY_FORMAT)

    def next_word(self, n: int = 1) -> Selection | None:
        return self.next_thing(Thing.WORD, Thing.WORD, n)

    def back_word(self, n: int = 1) -> Selection | None:
        return self.next_thing(Thing.WORD, Thing.WORD, -n)

    def next_symbol(self, n: int = 1) -> Selection | None:
        return self.next_thing(Thing.SYMBOL, Thing.SYMBOL, n)

    def back_symbol(self, n: int = 1) -> Selection | None:
        return self.next_thing(Thing.SYMBOL, Thing.SYMBOL, -n)


__all__ = ["CjkMotion", "WORD_BOUNDARY_FORMAT"]
