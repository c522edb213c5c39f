"""
Handshake protocol model - pure transition function.

Three states: IDLE -(S)-> SYN_RECEIVED -(K)-> ACK_RECEIVED. Symbols that
do not trigger an advance are echoed back and leave the state unchanged;
the protocol is lenient, so unknown symbols are never a fault. A bad
checksum suppresses the transition and produces the error marker.

Every (state, symbol class) pair that classify() can produce has an
entry in TRANSITION_TABLE.
"""
from typing import Dict, NamedTuple, Optional, Tuple

import structlog

from dutcheck.models import FSMState, SymbolClass

logger = structlog.get_logger()

ERROR_MARKER = "E"

# Symbol that advances each state; ACK_RECEIVED is terminal
ADVANCE_SYMBOLS: Dict[FSMState, Optional[str]] = {
    FSMState.IDLE: "S",
    FSMState.SYN_RECEIVED: "K",
    FSMState.ACK_RECEIVED: None,
}

# (state, class) -> (next state, output). Output None means echo the input.
TRANSITION_TABLE: Dict[Tuple[FSMState, SymbolClass], Tuple[FSMState, Optional[str]]] = {
    (FSMState.IDLE, SymbolClass.ADVANCE): (FSMState.SYN_RECEIVED, "A"),
    (FSMState.IDLE, SymbolClass.OTHER): (FSMState.IDLE, None),
    (FSMState.IDLE, SymbolClass.CHECKSUM_ERROR): (FSMState.IDLE, ERROR_MARKER),
    (FSMState.SYN_RECEIVED, SymbolClass.ADVANCE): (FSMState.ACK_RECEIVED, "C"),
    (FSMState.SYN_RECEIVED, SymbolClass.OTHER): (FSMState.SYN_RECEIVED, None),
    (FSMState.SYN_RECEIVED, SymbolClass.CHECKSUM_ERROR): (FSMState.SYN_RECEIVED, ERROR_MARKER),
    (FSMState.ACK_RECEIVED, SymbolClass.OTHER): (FSMState.ACK_RECEIVED, None),
    (FSMState.ACK_RECEIVED, SymbolClass.CHECKSUM_ERROR): (FSMState.ACK_RECEIVED, ERROR_MARKER),
}

ALL_EDGES: Tuple[Tuple[FSMState, SymbolClass], ...] = tuple(TRANSITION_TABLE)


class Transition(NamedTuple):
    """Outcome of one model step"""
    next_state: FSMState
    output: str
    symbol_class: SymbolClass


def classify(state: FSMState, symbol: str, checksum_valid: bool) -> SymbolClass:
    """Map an input to its symbol class in ``state``. A bad checksum always wins."""
    if not checksum_valid:
        return SymbolClass.CHECKSUM_ERROR
    if symbol == ADVANCE_SYMBOLS[state]:
        return SymbolClass.ADVANCE
    return SymbolClass.OTHER


def step(state: FSMState, symbol: str, checksum_valid: bool) -> Transition:
    """
    Apply one input to the model.

    Args:
        state: State before the event
        symbol: Input symbol
        checksum_valid: Result of checksum validation for the symbol

    Returns:
        Transition with the next state, the output symbol and the class
        of the input
    """
    symbol_class = classify(state, symbol, checksum_valid)
    next_state, output = TRANSITION_TABLE[(state, symbol_class)]
    if output is None:
        output = symbol

    if next_state != state:
        logger.debug(
            "state_transition",
            from_state=state.value,
            to_state=next_state.value,
            symbol=symbol,
        )

    return Transition(next_state, output, symbol_class)
