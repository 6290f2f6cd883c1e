"""Example: use the rules engine and sales parser directly (no Flask, no DB)."""

from src.deployment_system.deployment_system.breaks.calculator.statutory_calculator import calculate_break_time
from src.deployment_system.deployment_system.breaks.work_hours import calculate_work_hours
from src.deployment_system.deployment_system.sales.parser import parse_sales_data
from src.deployment_system.deployment_system.sales.report import generate_summary_report
from src.deployment_system.deployment_system.shifts.classifier import classify_shift

PASTED = "\n".join(
    [
        "10:00 AM\t£200.00\t£210.00\t£220.00",
        "Lunch\t£900.00\t£950.00\t£1,000.00",
        "5:00 PM\t£300.00\t£320.00\t£330.00",
        "Day Totals\t£500.00\t£530.00\t£550.00",
    ]
)


def main():
    for start, end in [("9:00 AM", "5:00 PM"), ("10:00 AM", "7:00 PM"), ("11:00 PM", "4:00 AM")]:
        hours = calculate_work_hours(start, end)
        print(start, "-", end, "->", classify_shift(start, end).value, f"break={calculate_break_time(False, hours)}")

    print(generate_summary_report(parse_sales_data(PASTED)))


if __name__ == "__main__":
    main()
