"""Turning screenshot readings into additions and updates of pick-up packages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Union

from lifemanager.shopee import OcrResult, ShopeePackage

DEFAULT_TITLE = "Shopee Package"
"""Title given to a package whose screenshot showed no title."""

_BRACKETS = ("\u3010", "\u3011")


@dataclass(frozen=True)
class AddPackage:
    """A new package should be added."""

    title: str
    store: Optional[str]
    code: Optional[str]
    due_date: Optional[str]
    date_is_estimate: bool


@dataclass(frozen=True)
class UpdateCode:
    """An existing package that had no pick-up code should get one."""

    package_id: str
    code: str


ImportAction = Union[AddPackage, UpdateCode]


def _strip_brackets(text: str) -> str:
    for bracket in _BRACKETS:
        text = text.replace(bracket, "")
    return text


def _matches(package: ShopeePackage, result: OcrResult) -> bool:
    if package.picked_up:
        return False
    if result.title is not None:
        ocr_clean = _strip_brackets(result.title)
        pkg_clean = _strip_brackets(package.title)
        if ocr_clean and (ocr_clean in pkg_clean or pkg_clean in ocr_clean):
            return True
    if (
        package.store is not None
        and result.store is not None
        and package.store == result.store
        and package.code is not None
        and result.code is not None
    ):
        return package.code == result.code
    return False


def find_matching_package(
    packages: Iterable[ShopeePackage], result: OcrResult
) -> Optional[ShopeePackage]:
    """The first package still waiting that the reading refers to, if any.

    A package matches when one title contains the other (ignoring the
    lenticular brackets shops put around names), or when store and code agree.
    """
    return next((pkg for pkg in packages if _matches(pkg, result)), None)


def plan_ocr_import(
    packages: Sequence[ShopeePackage], results: Iterable[OcrResult]
) -> list[ImportAction]:
    """Decide, for each reading, whether to add a package or fill in its code.

    Readings are matched against the packages as they were before the import;
    a matched package that already has a code, or a reading with no code, is
    left alone.
    """
    actions: list[ImportAction] = []
    for result in results:
        existing = find_matching_package(packages, result)
        if existing is None:
            actions.append(
                AddPackage(
                    title=result.title if result.title is not None else DEFAULT_TITLE,
                    store=result.store,
                    code=result.code,
                    due_date=result.due_date,
                    date_is_estimate=result.date_is_estimate,
                )
            )
        elif existing.code is None and result.code is not None:
            actions.append(UpdateCode(package_id=existing.id, code=result.code))
    return actions


def optional_field(text: str) -> Optional[str]:
    """A form field's value, or None when it was left empty."""
    return text if text else None