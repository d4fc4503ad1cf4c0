"""
Interaction boundary

Resolves a pointer activation on a drawn circle back to its UTXO. The
caller performs any navigation; this module only describes the target.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import logging

from .layout.types import PackingResult, Utxo

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActivationEvent:
    """
    Pointer activation reported by a rendering surface

    Attributes:
        data_index: Placement index carried by the activated primitive
        shift_key: Shift held during the click
        ctrl_key: Ctrl held during the click
        meta_key: Meta/Cmd held during the click
    """
    data_index: int
    shift_key: bool = False
    ctrl_key: bool = False
    meta_key: bool = False

    @property
    def has_modifier(self) -> bool:
        return self.shift_key or self.ctrl_key or self.meta_key


@dataclass(frozen=True)
class Activation:
    """
    Resolved activation target

    Attributes:
        utxo: Activated UTXO
        tx_path: Relative path of the transaction page
        fragment: Fragment selecting the output on that page
        open_in_new_window: True when a modifier key was held
    """
    utxo: Utxo
    tx_path: str
    fragment: str
    open_in_new_window: bool


def resolve_activation(event: ActivationEvent, result: PackingResult) -> Optional[Activation]:
    """
    Map an activation event to the UTXO it targets

    Args:
        event: Activation from the rendering surface
        result: Packing the drawn primitives were built from

    Returns:
        Activation, or None when the index does not refer to a placed circle
    """
    if not 0 <= event.data_index < result.n_circles:
        logger.debug(f"Activation index {event.data_index} out of range")
        return None

    utxo = result.circles[event.data_index].utxo
    return Activation(
        utxo=utxo,
        tx_path=f"/tx/{utxo.txid}",
        fragment=f"vout={utxo.vout}",
        open_in_new_window=event.has_modifier
    )
