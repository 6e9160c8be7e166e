"""Payment primitives shared by the scenario strategies and the fallback allocator.

Each ``try_*`` function checks availability against the ledger first and
only then charges it, returning the resulting OrderPayment, or None when
the composition does not fit the remaining limits. The ledger is left
untouched when None is returned.
"""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal

from paysolver.config import SolverConfig
from paysolver.ledger import Ledger
from paysolver.math.money import apply_discount, quantize_money
from paysolver.models.problem import Order, PaymentMethod
from paysolver.strategies.base import OrderPayment, PaymentKind


def full_payment_cost(order: Order, method: PaymentMethod) -> Decimal:
    """Amount charged when ``method`` pays the whole order at its own discount."""
    return apply_discount(order.value, method.discount)


def can_pay_full(ledger: Ledger, order: Order, method: PaymentMethod) -> bool:
    """True if the method's remaining limit absorbs the discounted order value."""
    return ledger.can_cover(method.id, full_payment_cost(order, method))


def pay_full(
    ledger: Ledger, order: Order, method: PaymentMethod, kind: PaymentKind
) -> OrderPayment:
    """Charge the whole discounted order value to one method."""
    cost = full_payment_cost(order, method)
    ledger.apply_payment(method.id, cost)
    return OrderPayment(order=order, parts={method.id: cost}, kind=kind)


def partial_points_shares(order: Order, config: SolverConfig) -> tuple[Decimal, Decimal]:
    """Split an order into its points share and card share.

    The points share is the configured fraction of the gross value; the card
    pays the rest of the value discounted by the flat partial-points percent.

    Returns:
        Tuple of (points_share, card_share)
    """
    points_share = quantize_money(order.value * config.partial_points_share)
    discounted = apply_discount(order.value, config.partial_points_discount)
    return points_share, discounted - points_share


def best_promoted_card(
    ledger: Ledger, order: Order, cards: Sequence[PaymentMethod]
) -> PaymentMethod | None:
    """Highest-discount promotion-eligible card that can pay the whole order.

    Cards with equal discount resolve to the first in definition order.
    """
    affordable = [
        card
        for card in cards
        if order.is_promoted_with(card.id) and can_pay_full(ledger, order, card)
    ]
    if not affordable:
        return None
    return max(affordable, key=lambda card: card.discount)


def split_card(
    ledger: Ledger, cards: Sequence[PaymentMethod], card_share: Decimal
) -> PaymentMethod | None:
    """Card to carry the card share of a partial-points payment.

    Any card with enough remaining limit qualifies; the lowest-discount one is
    used so high-discount cards stay available for promotion payments.
    """
    affordable = [card for card in cards if ledger.can_cover(card.id, card_share)]
    if not affordable:
        return None
    return min(affordable, key=lambda card: card.discount)


def try_partial_points(
    ledger: Ledger,
    order: Order,
    points: PaymentMethod | None,
    cards: Sequence[PaymentMethod],
    config: SolverConfig,
) -> OrderPayment | None:
    """Pay the points share with points and the rest with one card."""
    if points is None:
        return None

    points_share, card_share = partial_points_shares(order, config)
    if points_share <= 0 or not ledger.can_cover(points.id, points_share):
        return None

    card = split_card(ledger, cards, card_share)
    if card is None:
        return None

    ledger.apply_payment(points.id, points_share)
    ledger.apply_payment(card.id, card_share)
    return OrderPayment(
        order=order,
        parts={points.id: points_share, card.id: card_share},
        kind=PaymentKind.PARTIAL_POINTS,
    )


def try_full_points(
    ledger: Ledger, order: Order, points: PaymentMethod | None
) -> OrderPayment | None:
    """Pay the whole order with points at the points discount."""
    if points is None or not can_pay_full(ledger, order, points):
        return None
    return pay_full(ledger, order, points, PaymentKind.POINTS)


def try_best_card(
    ledger: Ledger, order: Order, cards: Sequence[PaymentMethod]
) -> OrderPayment | None:
    """Pay the whole order with the best promotion-eligible card."""
    card = best_promoted_card(ledger, order, cards)
    if card is None:
        return None
    return pay_full(ledger, order, card, PaymentKind.CARD)
