from __future__ import annotations


def main() -> None:
    # [START README_QUICKSTART]
    from datetime import date

    from daily_binomial import (
        AmericanCall,
        BusinessDayCalendar,
        ZeroCurve,
        build_american_call_tree,
    )

    calendar = BusinessDayCalendar([date(2019, 4, 19), date(2019, 5, 1)])
    curve = ZeroCurve(
        name="PRE",
        calendar=calendar,
        reference_date=date(2019, 3, 29),
        vertices=[1, 22, 44, 63, 86, 108, 129],
        rates=[0.064, 0.0642, 0.0642, 0.0644, 0.0645, 0.0646, 0.0648],
    )
    call = AmericanCall(
        curve=curve,
        dividend_yield=0.0,
        spot=17.3,
        strike=18.0,
        volatility=0.44,
        pricing_date=date(2019, 3, 29),
        maturity=date(2019, 9, 30),
    )

    tree = build_american_call_tree(call)
    print("steps:", tree.days_to_maturity)
    print("u, d:", tree.u, tree.d)
    print("PV:", tree.present_value)
    # [END README_QUICKSTART]


if __name__ == "__main__":
    main()
