"""Demo: the reference 300k purchase priced on every schedule, plus two rejected requests."""

from mortgage.calculation import calculate_mortgage
from mortgage.calculator import MortgageQuote


def main() -> None:
    # 300,000 purchase, 14% down (3.1% insurance tier), 4.19% over 25 years
    base = {
        "propertyPrice": 300_000,
        "downPayment": 42_000,
        "annualInterestRate": 4.19,
        "amortizationPeriod": 25,
    }
    schedules = [
        ("m", "Monthly"),
        ("bw", "Bi-weekly"),
        ("abw", "Accelerated bi-weekly"),
    ]

    print("=== Mortgage Demo ===\n")
    print("Property 300,000 | down 42,000 | 4.19% | 25 years\n")
    for i, (code, label) in enumerate(schedules, start=1):
        outcome = calculate_mortgage({**base, "paymentSchedule": code})
        assert isinstance(outcome, MortgageQuote)
        print(f"{i}) {label}")
        print(f"   Premium = {outcome.insurance_premium:,.2f}")
        print(f"   Loan    = {outcome.total_loan_amount:,.2f}")
        print(f"   Payment = {outcome.payment:,.2f} x {outcome.payments_per_year} a year\n")

    # Rejected: down payment under the 5% insurable floor, and a 32-year amortization
    low_down = calculate_mortgage({**base, "downPayment": 4_000, "paymentSchedule": "m"})
    long_term = calculate_mortgage({**base, "amortizationPeriod": 32, "paymentSchedule": "m"})
    print("4) Down payment 4,000")
    print(f"   {low_down.message}\n")
    print("5) Amortization 32 years")
    print(f"   {long_term.message}\n")
    print("Done.")


if __name__ == "__main__":
    main()
