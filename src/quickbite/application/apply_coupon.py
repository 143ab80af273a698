"""Application service: Apply Coupon use case.

At most one coupon is active; applying a new one replaces the old.
An unknown code is turned down with a message and the stored coupon
stays exactly as it was.
"""

from __future__ import annotations

from quickbite.application.dto import CouponOutcome
from quickbite.domain.model.coupon import CouponNotFound, CouponPolicy
from quickbite.domain.repository.preferences_repository import PreferencesRepository


class ApplyCouponHandler:

    def __init__(self, coupons: CouponPolicy, preferences: PreferencesRepository) -> None:
        self._coupons = coupons
        self._preferences = preferences

    def handle(self, code: str | None) -> CouponOutcome:
        resolved = self._coupons.resolve(code)

        if resolved is None:
            self._preferences.set_coupon(None)
            return CouponOutcome(accepted=True, code=None, message="Coupon removed.")

        if isinstance(resolved, CouponNotFound):
            return CouponOutcome(
                accepted=False,
                code=self._preferences.get_coupon(),
                message=f"Coupon '{resolved.code}' is not valid.",
            )

        self._preferences.set_coupon(resolved.code)
        return CouponOutcome(
            accepted=True,
            code=resolved.code,
            message=f"Coupon {resolved.code} applied: {resolved.describe()}.",
        )

    def clear(self) -> CouponOutcome:
        return self.handle(None)
