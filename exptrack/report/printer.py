from exptrack import config


def print_summary(title: str, data: dict):
    currency = config.get("app.currency", "$")

    print("\n" + title)
    print("-" * len(title))

    total = 0.0
    for key in sorted(data):
        val = data[key]
        print(f"{key:<15} {currency}{val:,.2f}")
        total += val

    print("-" * len(title))
    print(f"{'TOTAL':<15} {currency}{total:,.2f}")
