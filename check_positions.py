#!/usr/bin/env python3
"""
Validate every FEN in a CSV file.

Usage:
    python check_positions.py --csv data/game1/game1.csv
    python check_positions.py --csv positions.csv --fen_column position --output report.csv

Prints a per-error-kind summary and the first invalid rows. With --output,
writes the CSV back with valid/error/message columns added.
"""

import os
import sys
import argparse
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from data.data_loader import load_positions, summarize_errors


def main():
    parser = argparse.ArgumentParser(description="Validate FEN board fields in a CSV file")
    parser.add_argument("--csv", type=str, required=True,
                       help="CSV file with a FEN column")
    parser.add_argument("--fen_column", type=str, default="fen",
                       help="Name of the FEN column")
    parser.add_argument("--output", type=str, default=None,
                       help="Write the annotated CSV to this path")
    parser.add_argument("--show", type=int, default=10,
                       help="Number of invalid rows to print")

    args = parser.parse_args()

    if not os.path.exists(args.csv):
        print(f"ERROR: File not found: {args.csv}")
        sys.exit(1)

    df = load_positions(args.csv, fen_column=args.fen_column)

    print(f"\n{'='*60}")
    print("POSITION CHECK")
    print(f"{'='*60}")
    print(f"Valid:   {int(df['valid'].sum())}")
    print(f"Invalid: {int((~df['valid']).sum())}")

    counts = summarize_errors(df)
    if len(counts) > 0:
        print("\nErrors by kind:")
        for kind, count in counts.items():
            print(f"  {kind:<20} {count}")

        print(f"\nFirst {args.show} invalid rows:")
        for idx, row in df[~df["valid"]].head(args.show).iterrows():
            print(f"  row {idx}: {row[args.fen_column]!r}")
            print(f"    {row['error']}: {row['message']}")

    if args.output:
        df.to_csv(args.output, index=False)
        print(f"\nAnnotated CSV saved to: {args.output}")

    print(f"{'='*60}")


if __name__ == "__main__":
    main()
