"""
Bridge — synchronise l'état persistant d'un Block avec l'état réactif de l'hôte de rendu.

Le Block n'importe aucune primitive réactive : l'hôte lui passe la sienne,
sous la forme d'un StateHook  (initial) -> (value, setter).

Ce module fournit :
  - StateCell  : protocole minimal d'une cellule réactive (read / write / subscribe)
  - ReactiveCell : implémentation de référence
  - HookHost   : hôte de rendu minimal, un useState persistant entre rendus
  - cell_state_hook() : adapte un StateCell quelconque au contrat StateHook
"""
from typing import Any, Callable, List, Protocol, Tuple, runtime_checkable

Setter = Callable[[Any], None]
StateHook = Callable[[Any], Tuple[Any, Setter]]


@runtime_checkable
class StateCell(Protocol):
    def read(self) -> Any: ...
    def write(self, value: Any) -> None: ...
    def subscribe(self, callback: Callable[[Any], None]) -> None: ...


class ReactiveCell:
    """Cellule réactive : notifie ses abonnés à chaque écriture."""

    def __init__(self, initial: Any = None):
        self._value = initial
        self._listeners: List[Callable[[Any], None]] = []

    def read(self) -> Any:
        return self._value

    def write(self, value: Any) -> None:
        self._value = value
        for listener in list(self._listeners):
            listener(value)

    def subscribe(self, callback: Callable[[Any], None]) -> None:
        self._listeners.append(callback)


def cell_state_hook(cell: StateCell) -> StateHook:
    """StateCell → StateHook. La valeur initiale n'est écrite que si la cellule est vide."""
    def hook(initial: Any) -> Tuple[Any, Setter]:
        if cell.read() is None and initial is not None:
            cell.write(initial)
        return cell.read(), cell.write
    return hook


class HookHost:
    """
    Hôte de rendu minimal, équivalent d'un composant monté.

    Les cellules sont indexées par ordre d'appel pendant un rendu et survivent
    aux rendus suivants : l'argument `initial` n'est lu qu'au premier appel.

    Usage:
        >>> host = HookHost()
        >>> host.begin_render()
        >>> value, set_value = host.use_state(0)
        >>> set_value(3)
        >>> host.dirty
        True
    """

    def __init__(self):
        self.cells: List[ReactiveCell] = []
        self.dirty = False
        self.render_count = 0
        self._cursor = 0

    def begin_render(self) -> None:
        self._cursor = 0
        self.dirty = False
        self.render_count += 1

    def use_state(self, initial: Any) -> Tuple[Any, Setter]:
        if self._cursor >= len(self.cells):
            cell = ReactiveCell(initial)
            cell.subscribe(self._mark_dirty)
            self.cells.append(cell)
        cell = self.cells[self._cursor]
        self._cursor += 1
        return cell.read(), cell.write

    def _mark_dirty(self, _value: Any) -> None:
        self.dirty = True
