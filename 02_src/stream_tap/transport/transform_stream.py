"""Transform-stream transport for pipeline stages.

A transformer receives each upstream chunk through
``transform(chunk, controller)`` and the end of the stream through
``flush(controller)``. Whatever it passes to ``controller.enqueue()`` is
delivered downstream before the next upstream chunk is pulled, so a stage can
neither buffer nor reorder unless it does so itself.

Drivers are pull-based generators: the consumer asking for the next item is
the only thing that advances the upstream iterator. If the consumer stops
early, or the upstream raises, ``flush`` is skipped and the exception reaches
the consumer.
"""

from typing import (
    Any,
    AsyncIterable,
    AsyncIterator,
    Iterable,
    Iterator,
    Protocol,
)

from ..logging_config import get_logger

logger = get_logger(__name__)


class IStreamController(Protocol):
    """Handle given to a transformer for sending chunks downstream."""

    def enqueue(self, chunk: Any) -> None:
        """Send a chunk downstream."""
        ...


class ITransformer(Protocol):
    """A pipeline stage driven by a transform stream."""

    def transform(self, chunk: Any, controller: IStreamController) -> None:
        """Handle one upstream chunk."""
        ...

    def flush(self, controller: IStreamController) -> None:
        """Handle normal end of the upstream."""
        ...


class StreamController:
    """Collects the chunks enqueued during a single transformer callback."""

    def __init__(self):
        self._pending: list[Any] = []

    def enqueue(self, chunk: Any) -> None:
        """Send a chunk downstream."""
        self._pending.append(chunk)

    def drain(self) -> list[Any]:
        """Take everything enqueued since the last drain."""
        pending, self._pending = self._pending, []
        return pending


async def pipe_through(
    source: AsyncIterable[Any], transformer: ITransformer
) -> AsyncIterator[Any]:
    """Drive an async iterable through a transformer."""
    controller = StreamController()
    iterator = source.__aiter__()
    try:
        async for chunk in iterator:
            error: Exception | None = None
            try:
                transformer.transform(chunk, controller)
            except Exception as e:
                error = e
            # Forward what was enqueued before surfacing a transformer error
            for item in controller.drain():
                yield item
            if error is not None:
                raise error

        transformer.flush(controller)
        for item in controller.drain():
            yield item
    finally:
        aclose = getattr(iterator, "aclose", None)
        if aclose is not None:
            await aclose()


def iter_through(source: Iterable[Any], transformer: ITransformer) -> Iterator[Any]:
    """Drive a sync iterable through a transformer."""
    controller = StreamController()
    iterator = iter(source)
    try:
        for chunk in iterator:
            error: Exception | None = None
            try:
                transformer.transform(chunk, controller)
            except Exception as e:
                error = e
            for item in controller.drain():
                yield item
            if error is not None:
                raise error

        transformer.flush(controller)
        yield from controller.drain()
    finally:
        close = getattr(iterator, "close", None)
        if close is not None:
            close()


class TransformStream:
    """Binds a transformer to a single upstream."""

    def __init__(self, transformer: ITransformer):
        self._transformer = transformer
        self._locked = False

    @property
    def transformer(self) -> ITransformer:
        return self._transformer

    @property
    def locked(self) -> bool:
        """True once the stream has been piped."""
        return self._locked

    def _lock(self) -> None:
        if self._locked:
            raise RuntimeError("TransformStream is already piped")
        self._locked = True
        logger.debug("Piping through %s", type(self._transformer).__name__)

    def pipe(self, source: AsyncIterable[Any]) -> AsyncIterator[Any]:
        """Pipe an async upstream through the transformer."""
        self._lock()
        return pipe_through(source, self._transformer)

    def pipe_sync(self, source: Iterable[Any]) -> Iterator[Any]:
        """Pipe a sync upstream through the transformer."""
        self._lock()
        return iter_through(source, self._transformer)
