"""System decorator.

Usage:
    @system()
    def weather(world: World) -> list[str]:
        if world.clock % 5 == 0:
            return ["It starts to rain."]
        return None

    world.register_system(weather)
"""

from __future__ import annotations

from collections.abc import Callable

from storyecs.core.system.models import SystemDescriptor, SystemReturn


class _SystemDecorator:
    """System decorator factory. Used as @system() or @system(name=...)."""

    def __call__(
        self,
        name: str | None = None,
    ) -> Callable[[Callable[..., SystemReturn]], SystemDescriptor]:
        """Wrap a function as a per-turn system.

        Args:
            name: System name for logs; defaults to the function name.

        Returns:
            Decorator that returns the system's descriptor.
        """

        def decorator(fn: Callable[..., SystemReturn]) -> SystemDescriptor:
            return SystemDescriptor(name=name or fn.__name__, run=fn)

        return decorator


system = _SystemDecorator()
