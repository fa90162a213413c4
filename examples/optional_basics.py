"""
Optional basics: presence checks, defaults, and combinators.

Run: python examples/optional_basics.py
"""
from optionalpy import Optional


def lookup(users, name):
    return Optional.of_nullable(users.get(name))


def main():
    users = {"ada": {"email": "ada@example.com"}, "bob": {"email": None}}

    email = lookup(users, "ada").map(lambda u: u["email"])
    print("ada =>", email.get_or("<none>"))                     # ada@example.com

    missing = lookup(users, "bob").map(lambda u: u["email"])
    print("bob =>", missing.get_or(lambda: "<computed>"))       # <computed>

    lookup(users, "eve").if_present_or_else(
        lambda u: print("eve =>", u),
        lambda: print("eve => not found"),
    )

    print("even =>", Optional.of_nullable(4).filter(lambda x: x % 2 == 0).is_present())  # True
    print("flat_map =>", Optional.empty().flat_map(lambda x: x))  # <undefined>


if __name__ == "__main__":
    main()
