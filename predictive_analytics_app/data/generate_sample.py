"""Generate sample activity history for trying out the dashboard.

Run: python data/generate_sample.py
Creates: data/sample_history.xlsx and data/sample_history.json
"""

import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from core.data.sample import generate_sample_history, sample_payload  # noqa: E402


if __name__ == "__main__":
    out_dir = Path(__file__).parent
    df = generate_sample_history()
    df.to_excel(out_dir / "sample_history.xlsx", index=False, engine="openpyxl")
    (out_dir / "sample_history.json").write_text(json.dumps(sample_payload(), indent=2))
    print(f"Sample data generated in {out_dir}")
    print(f"  Shape: {df.shape}")
    print(f"  Date range: {df['date'].min().date()} to {df['date'].max().date()}")
    print(df.tail())
