#!/usr/bin/env python3
"""Validate the bundled i18n files for consistency.

Standalone CI script (stdlib only). Checks JSON syntax, that every locale
has the same files and keys as English, that no value is empty, and that
translated strings use the same ``{placeholders}`` as English.

Exit code 0 = all checks passed, 1 = at least one failure.
"""

from __future__ import annotations

import json
import string
import sys
from pathlib import Path
from typing import Any

__all__: list[str] = []

REPO_ROOT = Path(__file__).resolve().parent.parent
I18N_DIR = REPO_ROOT / "quickactions" / "resources" / "i18n"
REFERENCE_LOCALE = "en"


def flatten(data: dict[str, Any], prefix: str = "") -> dict[str, Any]:
    """Flattens nested dicts into ``{"a.b.c": leaf}``."""
    flat: dict[str, Any] = {}
    for key, value in data.items():
        full_key = f"{prefix}.{key}" if prefix else key
        if isinstance(value, dict):
            flat.update(flatten(value, full_key))
        else:
            flat[full_key] = value
    return flat


def placeholders(text: str) -> set[str]:
    """Named ``str.format`` fields used in ``text``."""
    return {field for _, field, _, _ in string.Formatter().parse(text) if field}


def load_tree(i18n_dir: Path) -> tuple[dict[str, dict[str, Any]], list[str]]:
    """Loads every JSON file below ``i18n_dir``.

    Returns:
        Tuple of ({"en/ui.json": data, "emoji.json": data, ...}, syntax errors).
    """
    files: dict[str, dict[str, Any]] = {}
    errors: list[str] = []
    for path in sorted(i18n_dir.rglob("*.json")):
        rel = path.relative_to(i18n_dir).as_posix()
        try:
            files[rel] = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            errors.append(f"  {rel}: {exc}")
    return files, errors


def check_locale_parity(files: dict[str, dict[str, Any]]) -> list[str]:
    """Every locale must have the reference locale's files and keys, and no extras."""
    errors: list[str] = []
    reference = {rel.split("/", 1)[1]: data for rel, data in files.items() if rel.startswith(f"{REFERENCE_LOCALE}/")}
    locales = sorted({rel.split("/", 1)[0] for rel in files if "/" in rel} - {REFERENCE_LOCALE})

    for locale in locales:
        own = {rel.split("/", 1)[1]: data for rel, data in files.items() if rel.startswith(f"{locale}/")}
        for name in sorted(reference.keys() ^ own.keys()):
            where = locale if name in reference else REFERENCE_LOCALE
            errors.append(f"  {where}/ is missing {name}")
        for name in sorted(reference.keys() & own.keys()):
            ref_flat, own_flat = flatten(reference[name]), flatten(own[name])
            for key in sorted(ref_flat.keys() - own_flat.keys()):
                errors.append(f"  {locale}/{name}: missing key {key}")
            for key in sorted(own_flat.keys() - ref_flat.keys()):
                errors.append(f"  {locale}/{name}: unknown key {key}")
            for key in sorted(ref_flat.keys() & own_flat.keys()):
                ref_val, own_val = ref_flat[key], own_flat[key]
                if isinstance(ref_val, str) and isinstance(own_val, str):
                    if placeholders(ref_val) != placeholders(own_val):
                        errors.append(f"  {locale}/{name}: placeholders differ for {key}")
    return errors


def check_empty_values(files: dict[str, dict[str, Any]]) -> list[str]:
    """No translation may be an empty string."""
    return [
        f"  {rel}: empty value for '{key}'"
        for rel, data in files.items()
        for key, value in flatten(data).items()
        if value == ""
    ]


def validate(i18n_dir: Path = I18N_DIR) -> list[str]:
    """Runs all checks.

    Args:
        i18n_dir: Translation root to validate.

    Returns:
        Report lines; lines starting with "[FAIL]" mark failed checks.
    """
    if not (i18n_dir / REFERENCE_LOCALE).is_dir():
        return [f"[FAIL] Reference locale directory missing: {i18n_dir / REFERENCE_LOCALE}"]

    files, syntax_errors = load_tree(i18n_dir)
    report: list[str] = []
    for title, errors in (
        ("JSON syntax", syntax_errors),
        ("Locale parity", check_locale_parity(files)),
        ("No empty values", check_empty_values(files)),
    ):
        if errors:
            report.append(f"[FAIL] {title}: {len(errors)} issue(s)")
            report.extend(errors)
        else:
            report.append(f"[PASS] {title}")
    return report


def main() -> int:
    """Prints the report and returns the process exit code."""
    print("=== i18n Validation ===")  # noqa: T201
    report = validate()
    for line in report:
        print(line)  # noqa: T201

    failures = sum(1 for line in report if line.startswith("[FAIL]"))
    print()  # noqa: T201
    if failures == 0:
        print("=== RESULT: PASS ===")  # noqa: T201
        return 0
    print(f"=== RESULT: FAIL ({failures} check{'s' if failures != 1 else ''}) ===")  # noqa: T201
    return 1


if __name__ == "__main__":
    sys.exit(main())
