#!/usr/bin/env python3
"""
Example: Nested immutable updates
Demonstrates lens, prism and traversal composition over frozen dataclasses
"""

import sys
import os
from dataclasses import dataclass
from typing import List
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from optica import Just, NOTHING, Right, Left, each, maybe_applicative, CompositionError, Getter, setter
from optica.std import either, maybe
from optica.std.fields import field_lens


@dataclass(frozen=True)
class Address:
    city: str
    zip_code: object  # Maybe[str]


@dataclass(frozen=True)
class Employee:
    name: str
    salary: int
    address: Address


@dataclass(frozen=True)
class Company:
    name: str
    staff: List[Employee]


def main():
    company = Company("Acme", [
        Employee("Ann", 4000, Address("Paris", Just("75001"))),
        Employee("Ben", 3500, Address("Lyon", NOTHING)),
    ])

    print("=" * 80)
    print("EXAMPLE: Nested immutable updates")
    print("=" * 80)

    salaries = field_lens("staff") >> each(list) >> field_lens("salary")
    raised = salaries.modify(lambda s: s + 500)(company)
    print(f"Salaries before: {salaries.get_all(company)}")
    print(f"Salaries after:  {salaries.get_all(raised)}")
    print(f"Original untouched: {company.staff[0].salary == 4000}")

    zips = (
        field_lens("staff") >> each(list) >> field_lens("address")
        >> field_lens("zip_code") >> maybe.just()
    )
    print(f"\nKnown zip codes: {zips.get_all(company)}")
    print(f"First zip code:  {zips.head_option(company)}")

    def checked(salary):
        return Just(salary) if salary < 10000 else NOTHING

    print(f"\nValidated raise: {salaries.modify_f(maybe_applicative, checked)(raised) == Just(raised)}")

    results = [Right(1), Left("timeout"), Right(3)]
    print(f"\nSuccessful results: {(each(list) >> either.right()).get_all(results)}")

    try:
        setter(lambda f, xs: [f(x) for x in xs]) >> Getter(len)
    except CompositionError as e:
        print(f"\nRejected: {e}")


if __name__ == "__main__":
    main()
