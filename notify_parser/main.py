import argparse
import os
import sys

import pandas as pd

from .bank.type_router import TypeRouter

OUTPUT_COLUMNS = ["amount", "occurred_at", "balance", "status", "error"]


def received_at_value(raw):
    """CSV cells arrive as text; epoch values become ints, blanks become None."""
    if raw is None or pd.isna(raw):
        return None
    text = str(raw).strip()
    if not text:
        return None
    if text.isdigit():
        return int(text)
    return text


def parse_row(router: TypeRouter, row) -> dict:
    result = router.dispatch(row.get("bank_type", ""), row.get("message", ""), received_at_value(row.get("received_at")))
    if result.error is not None:
        return {"amount": "", "occurred_at": "", "balance": "",
                "status": result.error.kind.value, "error": str(result.error)}
    record = result.record
    return {
        "amount": str(record.amount),
        "occurred_at": record.occurred_at.isoformat(),
        "balance": str(record.balance) if record.balance is not None else "",
        "status": "success",
        "error": result.errors.get_error_msg(),
    }


def process_messages(input_path, output_path, router=None):
    router = router or TypeRouter.default()
    print(f"Reading from {input_path}")
    df = pd.read_csv(input_path, dtype=str, keep_default_na=False)

    missing = [col for col in ("bank_type", "message") if col not in df.columns]
    if missing:
        raise ValueError(f"input is missing required columns: {', '.join(missing)}")

    parsed = pd.DataFrame([parse_row(router, row) for row in df.to_dict("records")],
                          columns=OUTPUT_COLUMNS, index=df.index)
    df_out = pd.concat([df.drop(columns=[c for c in OUTPUT_COLUMNS if c in df.columns]), parsed], axis=1)
    df_out.to_csv(output_path, index=False, encoding="utf-8")

    parsed_count = int((df_out["status"] == "success").sum())
    print(f"Parsing complete. Processed {len(df_out)} messages, parsed {parsed_count} transactions.")
    print(f"Output saved to {output_path}")
    return df_out


def main(argv=None):
    parser = argparse.ArgumentParser(description="Parse bank payment notifications from a CSV file")
    parser.add_argument("input", type=str, help="Input CSV with bank_type, message and received_at columns")
    parser.add_argument("output", type=str, help="Output CSV path")
    args = parser.parse_args(argv)

    input_path = os.path.abspath(args.input)
    if not os.path.exists(input_path):
        print(f"Error: File {input_path} not found.")
        sys.exit(1)
    process_messages(input_path, os.path.abspath(args.output))


if __name__ == "__main__":
    main()
