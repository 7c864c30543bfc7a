#!/usr/bin/env python3
"""Basic usage example for swissuid.

This example demonstrates:
1. Parsing and validating a UID
2. Rendering the plain, HR and MWST forms
3. Handling invalid input
4. Compact binary encoding
5. Using UIDs in Pydantic models
"""

from __future__ import annotations

from pydantic import BaseModel, ValidationError

from swissuid import ParseError, SwissUid, SwissUidField, decode, encode, uid_field


class Company(BaseModel):
    """Company master record."""

    name: str
    uid: SwissUidField = uid_field()


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("swissuid Basic Usage Example")
    print("=" * 60)
    print()

    print("1. Parsing a UID...")
    uid = SwissUid("CHE109322551 MWST")
    print(f"   Parsed:      {uid}")
    print(f"   Debug:       {uid!r}")
    print(f"   Check digit: {uid.checkdigit()}")
    print()

    print("2. Output forms...")
    print(f"   Plain: {uid.to_string_plain()}")
    print(f"   HR:    {uid.to_string_hr()}")
    print(f"   MWST:  {uid.to_string_mwst()}")
    print()

    print("3. Invalid input...")
    for text in ("CH-109.322.551", "CHE-10.322.551", "CHE-009.322.551", "CHE-109.322.552"):
        try:
            SwissUid(text)
        except ParseError as e:
            print(f"   {text:<18} {type(e).__name__}: {e}")
    print()

    print("4. Binary encoding...")
    data = encode(uid)
    print(f"   Encoded: {data.hex()} ({len(data)} bytes)")
    print(f"   Decoded: {decode(data)}")
    print()

    print("5. Pydantic models...")
    company = Company(name="ACME AG", uid="che-109.322.551 hr")
    print(f"   {company.model_dump_json()}")
    try:
        Company(name="Broken AG", uid="CHE-100.000.800")
    except ValidationError as e:
        print(f"   Rejected: {e.errors()[0]['msg']}")


if __name__ == "__main__":
    main()
