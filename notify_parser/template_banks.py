"""
Banks handled by the template path, keyed by their wire tag.

Each entry needs `pay_time_pattern` and `pay_coin_pattern` (first capture
group is the value) and may set `pay_time_format` and `require_time`.
"""

TEMPLATE_BANKS = {
    # Bank Rakyat Indonesia: "11/04/2025 16:26:10 - Transfer ... sebesar Rp10.012,00 BERHASIL."
    "BRI": {
        "pay_time_pattern": r"(\d{2}/\d{2}/\d{4} \d{2}:\d{2}:\d{2})",
        "pay_coin_pattern": r"Rp(\d+\.\d{3})",
    },
}
