"""
Kind dispatcher.

Diffing and merging both select a handler by the kind tag of the left-hand
type. Handlers register against one or more ``TypeKind`` values instead of
being attached to the model classes.
"""

import logging
from typing import Any, Callable, Optional

from ..exceptions import InvalidArgumentError
from ..model import TypeKind

logger = logging.getLogger(__name__)

Handler = Callable[..., Any]


class KindDispatcher:
    """Routes a type definition or type reference to the handler for its kind."""

    def __init__(self, operation: str):
        self.operation = operation
        self._handlers: dict[TypeKind, Handler] = {}

    def register(self, *kinds: TypeKind) -> Callable[[Handler], Handler]:
        def decorator(func: Handler) -> Handler:
            for kind in kinds:
                if kind in self._handlers:
                    raise ValueError(
                        f"{self.operation} handler for {kind.value} already registered"
                    )
                self._handlers[kind] = func
            return func
        return decorator

    def handler_for(self, kind: Optional[TypeKind]) -> Handler:
        handler = self._handlers.get(kind)
        if handler is None:
            label = kind.value if isinstance(kind, TypeKind) else repr(kind)
            raise InvalidArgumentError(f"No {self.operation} handler for kind {label}")
        return handler

    @property
    def kinds(self) -> frozenset:
        return frozenset(self._handlers)

    def __call__(self, this: Any, *args: Any, **kwargs: Any) -> Any:
        kind = getattr(this, "kind", None)
        logger.debug(f"Dispatching {self.operation} for {getattr(this, 'name', None)} ({kind})")
        return self.handler_for(kind)(this, *args, **kwargs)
