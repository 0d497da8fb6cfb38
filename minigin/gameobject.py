"""Game objects with a parent/child transform hierarchy and components."""

from __future__ import annotations

from typing import Iterable, Optional, TypeVar

Vec3 = tuple[float, float, float]
ORIGIN: Vec3 = (0.0, 0.0, 0.0)

_C = TypeVar("_C", bound="Component")


def _vec3(values: Iterable[float]) -> Vec3:
    x, y, z = values
    return (float(x), float(y), float(z))


def _add(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def _sub(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


class Component:
    """Behaviour attached to a game object; subclasses override the hooks."""

    def __init__(self, owner: Optional[GameObject]) -> None:
        self._owner = owner

    @property
    def owner(self) -> Optional[GameObject]:
        return self._owner

    def update(self, delta_time: float) -> None:
        """Advance the component by ``delta_time`` seconds; nothing by default."""

    def render(self) -> bool:
        """Draw the component; the base class has nothing to draw and returns False."""
        return False

    def render_ui(self) -> bool:
        """Draw the component's interface; the base class draws none and returns False."""
        return False


class GameObject:
    """A node in the scene with a position, children and components."""

    def __init__(self) -> None:
        self._local_position: Vec3 = ORIGIN
        self._world_position: Vec3 = ORIGIN
        self._position_dirty = True
        self._parent: Optional[GameObject] = None
        self._children: list[GameObject] = []
        self._components: list[Component] = []
        self._destroyed = False

    # --- frame hooks ---

    def update(self, delta_time: float) -> None:
        for component in tuple(self._components):
            component.update(delta_time)

    def render(self) -> None:
        for component in tuple(self._components):
            component.render()

    def render_ui(self) -> None:
        for component in tuple(self._components):
            component.render_ui()

    # --- parenting ---

    @property
    def parent(self) -> Optional[GameObject]:
        return self._parent

    @property
    def children(self) -> tuple[GameObject, ...]:
        return tuple(self._children)

    def set_parent(
        self, parent: Optional[GameObject], keep_world_position: bool = False
    ) -> None:
        """Attach to ``parent`` (or detach with ``None``).

        Does nothing when ``parent`` is this object, its current parent or one
        of its direct children.
        """
        if parent is self or parent is self._parent or self._is_child(parent):
            return

        if parent is None:
            self.set_local_position(self.world_position)
        else:
            if keep_world_position:
                self.set_local_position(
                    _sub(self.world_position, parent.world_position)
                )
            self.set_position_dirty()

        if self._parent is not None:
            self._parent._remove_child(self)

        self._parent = parent

        if parent is not None:
            parent._add_child(self)

    def _add_child(self, child: Optional[GameObject]) -> None:
        if child is None or self._is_child(child):
            return
        self._children.append(child)
        child._parent = self

    def _remove_child(self, child: GameObject) -> None:
        remaining = [c for c in self._children if c is not child]
        if len(remaining) != len(self._children):
            self._children = remaining
            child._parent = None

    def _is_child(self, candidate: Optional[GameObject]) -> bool:
        return any(c is candidate for c in self._children)

    # --- transform ---

    @property
    def local_position(self) -> Vec3:
        return self._local_position

    def set_local_position(self, pos: Iterable[float]) -> None:
        self._local_position = _vec3(pos)
        self.set_position_dirty()

    @property
    def world_position(self) -> Vec3:
        if self._position_dirty:
            self.update_world_position()
        return self._world_position

    def update_world_position(self) -> None:
        if self._position_dirty:
            if self._parent is None:
                self._world_position = self._local_position
            else:
                self._world_position = _add(
                    self._parent.world_position, self._local_position
                )
        self._position_dirty = False

    def set_position_dirty(self) -> None:
        self._position_dirty = True
        for child in self._children:
            child.set_position_dirty()

    # --- destruction ---

    def mark_for_destroy(self) -> None:
        self._destroyed = True

    @property
    def is_marked_for_destroy(self) -> bool:
        return self._destroyed

    def mark_for_destroy_with_children(self) -> None:
        """Mark this object and its direct children for destruction."""
        self.mark_for_destroy()
        for child in self._children:
            child.mark_for_destroy()

    def destroy_children(self) -> None:
        """Detach all descendants and mark them for destruction."""
        children, self._children = self._children, []
        for child in children:
            child._parent = None
            child.destroy_children()
            child.mark_for_destroy()

    # --- components ---

    def add_component(self, component_type: type[_C], *args, **kwargs) -> _C:
        """Create a component owned by this object and attach it."""
        component = component_type(self, *args, **kwargs)
        self._components.append(component)
        return component

    def get_component(self, component_type: type[_C]) -> Optional[_C]:
        return next(
            (c for c in self._components if isinstance(c, component_type)), None
        )

    def has_component(self, component_type: type[Component]) -> bool:
        return any(isinstance(c, component_type) for c in self._components)

    def remove_component(self, component_type: type[Component]) -> None:
        """Remove every component of ``component_type``."""
        self._components = [
            c for c in self._components if not isinstance(c, component_type)
        ]

    def remove_component_instance(self, target: Component) -> bool:
        """Remove one specific component; report whether it was attached."""
        for index, component in enumerate(self._components):
            if component is target:
                del self._components[index]
                return True
        return False