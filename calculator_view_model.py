"""
Estado de la sesión y modelo de vista de la calculadora.

``apply`` es la función de transición pura: recibe una acción y una
sesión y devuelve la sesión siguiente. ``CalculatorViewModel`` la envuelve
para la interfaz, guarda la sesión actual y avisa a quien esté suscrito.
"""

import logging
from dataclasses import dataclass, replace

from calculator_actions import (
    Calculate,
    Clear,
    Decimal,
    Delete,
    Number,
    Operation,
)
from calculator_engine import CalculatorEngine
from calculator_state import CalculatorState


logger = logging.getLogger(__name__)

_DEFAULT_ENGINE = CalculatorEngine()


@dataclass(frozen=True)
class CalculatorSession:
    """Operación en pantalla, historial (más reciente primero) y racha de AC."""

    state: CalculatorState = CalculatorState()
    history: tuple = ()
    clear_clicks: int = 0

    def __post_init__(self):
        object.__setattr__(self, "history", tuple(self.history))


def apply(action, session: CalculatorSession,
          engine: CalculatorEngine = None) -> CalculatorSession:
    """Devuelve la sesión resultante de aplicar ``action`` a ``session``."""
    engine = engine if engine is not None else _DEFAULT_ENGINE

    if isinstance(action, Clear):
        clear_clicks = session.clear_clicks + 1
        history = session.history
        if clear_clicks == 2:
            logger.debug("Doble AC: se borra el historial")
            history = ()
            clear_clicks = 0
        return CalculatorSession(CalculatorState(), history, clear_clicks)

    state = session.state
    history = session.history

    if isinstance(action, Number):
        state = state.enter_number(action.digit)
    elif isinstance(action, Decimal):
        state = state.enter_decimal()
    elif isinstance(action, Operation):
        state = state.enter_operator(action.operator)
    elif isinstance(action, Delete):
        state = state.delete_last()
    elif isinstance(action, Calculate):
        state, history = _calculate(state, history, engine)
    else:
        raise ValueError(f"Acción desconocida: {action!r}")

    if state is session.state and history is session.history:
        logger.debug("Acción sin efecto: %r", action)

    return replace(session, state=state, history=history, clear_clicks=0)


def _calculate(state: CalculatorState, history: tuple, engine: CalculatorEngine):
    if not state.last_number.strip() or not state.operators:
        return state, history

    result = engine.evaluate(state.numbers, state.operators)
    entry = state.with_result(engine.history_text(result))
    return CalculatorState(numbers=(result,)), (entry,) + history


class CalculatorViewModel:
    """Mantiene la sesión que muestra la interfaz."""

    def __init__(self, engine: CalculatorEngine = None):
        self._engine = engine if engine is not None else CalculatorEngine()
        self._session = CalculatorSession()
        self._listeners = []

    @property
    def session(self) -> CalculatorSession:
        return self._session

    @property
    def state(self) -> CalculatorState:
        return self._session.state

    @property
    def history(self) -> tuple:
        return self._session.history

    def subscribe(self, callback):
        """Registra ``callback(session)``; devuelve la función para darse de baja."""
        self._listeners.append(callback)

        def _unsubscribe():
            if callback in self._listeners:
                self._listeners.remove(callback)

        return _unsubscribe

    def on_action(self, action):
        updated = apply(action, self._session, self._engine)
        if updated == self._session:
            return
        self._session = updated
        for callback in list(self._listeners):
            callback(updated)
