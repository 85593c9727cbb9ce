from __future__ import annotations
from dataclasses import asdict, dataclass
from typing import Dict, Optional, Sequence

import pandas as pd

from tictactoe.types import Mark

TIE = "tie"

ROUND_COLS = ["number", "winner", "moves", "human_score", "computer_score"]


@dataclass(frozen=True)
class RoundRecord:
    number: int
    winner: Optional[Mark]
    moves: int
    human_score: int
    computer_score: int


def rounds_frame(records: Sequence[RoundRecord]) -> pd.DataFrame:
    if not records:
        return pd.DataFrame(columns=ROUND_COLS)
    df = pd.DataFrame([asdict(r) for r in records], columns=ROUND_COLS)
    df["winner"] = df["winner"].fillna(TIE)
    return df


def average_moves(records: Sequence[RoundRecord]) -> float:
    df = rounds_frame(records)
    if df.empty:
        return 0.0
    return float(df["moves"].mean())


def summarize(records: Sequence[RoundRecord], labels: Dict[str, str]) -> pd.DataFrame:
    """
    One row per result kind (each mark in ``labels``, then ties) with the
    number of rounds and share of the match.
    """
    df = rounds_frame(records)
    if df.empty:
        return pd.DataFrame()

    counts = df["winner"].value_counts()
    keys = list(labels) + [TIE]

    out = pd.DataFrame(
        {
            "result": [labels.get(k, "Ties") for k in keys],
            "rounds": [int(counts.get(k, 0)) for k in keys],
        }
    )
    out["pct"] = (out["rounds"] / len(df) * 100).round(1)
    return out.set_index("result")
