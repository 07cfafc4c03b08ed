"""
Data Loader utilities for FEN position files.
Reads CSV files with a FEN column and validates every board field.
"""

from pathlib import Path
from typing import List, Optional, Union

import pandas as pd

from board.errors import FenError
from board.fen import decode_board, extract_board_field


def validate_fen(fen: str) -> Optional[FenError]:
    """
    Decodes the board field of a FEN string and reports the failure, if any.

    Args:
        fen: Full FEN or piece placement field

    Returns:
        None if the board field is valid, otherwise the FenError raised
    """
    try:
        decode_board(extract_board_field(fen))
    except FenError as e:
        return e
    return None


def validate_positions(df: pd.DataFrame, fen_column: str = "fen") -> pd.DataFrame:
    """
    Adds validation columns to a DataFrame of positions.

    Args:
        df: DataFrame containing a column of FEN strings
        fen_column: Name of that column

    Returns:
        Copy of df with extra columns:
        - valid: True if the board field decodes
        - error: Error kind (e.g. 'RowOverflow') or None
        - message: Error message or None
    """
    if fen_column not in df.columns:
        raise KeyError(f"Column '{fen_column}' not found. Columns: {list(df.columns)}")

    result = df.copy()
    errors: List[Optional[FenError]] = [
        validate_fen(fen) if isinstance(fen, str) else FenError(f"Not a FEN string: {fen!r}")
        for fen in result[fen_column]
    ]

    result["valid"] = pd.Series([e is None for e in errors], index=result.index, dtype=bool)
    result["error"] = pd.Series(
        [None if e is None else e.kind for e in errors], index=result.index, dtype=object
    )
    result["message"] = pd.Series(
        [None if e is None else str(e) for e in errors], index=result.index, dtype=object
    )
    return result


def load_positions(csv_path: Union[str, Path], fen_column: str = "fen") -> pd.DataFrame:
    """
    Load a CSV of positions and validate each FEN.

    Args:
        csv_path: Path to CSV file
        fen_column: Column holding the FEN strings

    Returns:
        DataFrame with the CSV columns plus valid, error, message
    """
    df = pd.read_csv(csv_path)
    result = validate_positions(df, fen_column=fen_column)

    n_invalid = int((~result["valid"]).sum())
    print(f"Loaded {len(result)} positions from {csv_path} ({n_invalid} invalid)")
    return result


def summarize_errors(df: pd.DataFrame) -> pd.Series:
    """Number of invalid rows per error kind, most common first."""
    return df.loc[~df["valid"], "error"].value_counts()
