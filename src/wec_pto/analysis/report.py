"""Diagnostic listings for groups of PTOs."""

from collections.abc import Iterable

import pandas as pd

from ..config.logging import get_logger
from ..pto.config import PtoConfig

logger = get_logger(__name__)

SUMMARY_COLUMNS = [
    "name",
    "pto_num",
    "k",
    "c",
    "pretension",
    "equilibrium_position",
    "loc_x",
    "loc_y",
    "loc_z",
    "init_disp_x",
    "init_disp_y",
    "init_disp_z",
    "location_state",
]


def format_listing(ptos: Iterable[PtoConfig]) -> str:
    """Join the description of each PTO, separated by blank lines.

    Args:
        ptos: PTO configurations to list

    Returns:
        Listing text (empty if there are no PTOs)
    """
    return "\n\n".join(pto.describe() for pto in ptos)


def summary_table(ptos: Iterable[PtoConfig]) -> pd.DataFrame:
    """Tabulate the parameters the simulation engine will consume.

    Args:
        ptos: PTO configurations to tabulate

    Returns:
        DataFrame with one row per PTO and SUMMARY_COLUMNS as columns
    """
    rows = [
        {
            "name": pto.name,
            "pto_num": pto.pto_num,
            "k": pto.k,
            "c": pto.c,
            "pretension": pto.pretension,
            "equilibrium_position": pto.equilibrium_position,
            "loc_x": float(pto.loc[0]),
            "loc_y": float(pto.loc[1]),
            "loc_z": float(pto.loc[2]),
            "init_disp_x": float(pto.init_disp.init_lin_disp[0]),
            "init_disp_y": float(pto.init_disp.init_lin_disp[1]),
            "init_disp_z": float(pto.init_disp.init_lin_disp[2]),
            "location_state": pto.location_state.value,
        }
        for pto in ptos
    ]

    if not rows:
        logger.warning("No PTOs to summarize")

    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)
