"""
Settlement service for equalizing partner contributions within a project.

Each partner's net paid (receipts minus payments on transactions linked to
both the partner and the project) is compared with the group average. A
partner below the average is owed the difference, a partner above it owes
the difference.
"""
import logging
from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, List, Optional
from app.core.config import settings
from app.models.settlement import Settlement, SettlementRun
from app.models.transaction import TransactionType
from app.services.exceptions import ProjectNotFoundError
from app.services.settlement_store import SettlementStore

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")
OWED_TO_PARTNER = "owed to partner"
OWED_BY_PARTNER = "owed by partner"


def utc_now() -> datetime:
    """Current UTC time as a naive datetime, matching the stored columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class PartnerPosition:
    """A partner's net paid and its distance from the group average."""
    def __init__(self, partner_id: int, current_balance: Decimal, net_paid: Decimal):
        self.partner_id = partner_id
        self.current_balance = current_balance
        self.net_paid = net_paid
        self.deviation = Decimal(0)


class SettlementDraft:
    """A settlement computed for one partner, not yet persisted."""
    def __init__(
        self,
        partner_id: int,
        linked_project_id: int,
        payment_amount: Decimal,
        previous_balance: Decimal,
        outstanding_amount: Decimal,
        final_balance: Decimal,
        date: datetime,
        notes: str
    ):
        self.partner_id = partner_id
        self.linked_project_id = linked_project_id
        self.payment_amount = payment_amount
        self.previous_balance = previous_balance
        self.outstanding_amount = outstanding_amount
        self.final_balance = final_balance
        self.date = date
        self.notes = notes


class SettlementCalculation:
    """Result of one equalization over a project's partners."""
    def __init__(
        self,
        project_id: int,
        average_net_paid: Decimal,
        positions: List[PartnerPosition],
        settlements: List[SettlementDraft]
    ):
        self.project_id = project_id
        self.average_net_paid = average_net_paid
        self.positions = positions
        self.settlements = settlements

    @property
    def partner_count(self) -> int:
        return len(self.positions)


def _to_decimal(value) -> Decimal:
    if value is None:
        return Decimal(0)
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def calculate_net_paid(transactions: Iterable) -> Decimal:
    """Sum receipts minus payments."""
    net_paid = Decimal(0)
    for transaction in transactions:
        amount = _to_decimal(transaction.amount)
        if transaction.transaction_type == TransactionType.RECEIPT:
            net_paid += amount
        elif transaction.transaction_type == TransactionType.PAYMENT:
            net_paid -= amount
    return net_paid


def average_net_paid(values: List[Decimal]) -> Decimal:
    """Arithmetic mean of net paid values. Empty input averages to zero."""
    if not values:
        return Decimal(0)
    return sum(values, Decimal(0)) / Decimal(len(values))


def compute_settlements(
    project_id: int,
    positions: List[PartnerPosition],
    epsilon: Optional[Decimal] = None,
    now: Optional[datetime] = None
) -> SettlementCalculation:
    """
    Compute equalizing settlements for the given partner positions.

    Pure function: positions are annotated with their deviation but nothing
    is stored. Fewer than two partners yields no settlements.
    """
    if epsilon is None:
        epsilon = settings.SETTLEMENT_EPSILON
    if now is None:
        now = utc_now()

    if len(positions) < 2:
        return SettlementCalculation(project_id, Decimal(0), positions, [])

    average = average_net_paid([p.net_paid for p in positions])

    drafts = []
    for position in positions:
        deviation = average - position.net_paid
        position.deviation = deviation

        # Near-zero deviations are rounding noise
        if abs(deviation) <= epsilon:
            continue

        amount = abs(deviation).quantize(CENTS, rounding=ROUND_HALF_UP)
        previous_balance = position.current_balance
        if deviation > 0:
            final_balance = previous_balance + amount
            notes = OWED_TO_PARTNER
        else:
            final_balance = previous_balance - amount
            notes = OWED_BY_PARTNER

        drafts.append(SettlementDraft(
            partner_id=position.partner_id,
            linked_project_id=project_id,
            payment_amount=amount,
            previous_balance=previous_balance,
            outstanding_amount=amount,
            final_balance=final_balance,
            date=now,
            notes=notes
        ))

    _absorb_rounding(drafts, positions)
    return SettlementCalculation(project_id, average, positions, drafts)


def _signed(draft: SettlementDraft) -> Decimal:
    """Balance movement of a draft: positive when owed to the partner."""
    return draft.payment_amount if draft.notes == OWED_TO_PARTNER else -draft.payment_amount


def _absorb_rounding(drafts: List[SettlementDraft], positions: List[PartnerPosition]):
    """
    Give the cents lost to per-partner rounding to the largest settlement.

    A three-way split of 100 settles as -66.66, +33.33 and +33.33, so the
    balances move by the rounded sum of the settled deviations.
    """
    if not drafts:
        return
    settled_ids = {draft.partner_id for draft in drafts}
    target = sum(
        (p.deviation for p in positions if p.partner_id in settled_ids), Decimal(0)
    ).quantize(CENTS, rounding=ROUND_HALF_UP)
    residual = target - sum((_signed(draft) for draft in drafts), Decimal(0))
    if residual == 0:
        return

    largest = max(drafts, key=lambda draft: draft.payment_amount)
    amount = largest.payment_amount + (residual if largest.notes == OWED_TO_PARTNER else -residual)
    if amount <= 0:
        return
    largest.payment_amount = amount
    largest.outstanding_amount = amount
    if largest.notes == OWED_TO_PARTNER:
        largest.final_balance = largest.previous_balance + amount
    else:
        largest.final_balance = largest.previous_balance - amount


def _load_positions(project_id: int, store: SettlementStore):
    """Fetch partners and their unsettled transactions for a project."""
    if not store.project_exists(project_id):
        raise ProjectNotFoundError(project_id)

    partners = store.list_partners_by_project(project_id)
    positions = []
    transactions = []
    for partner in partners:
        partner_transactions = store.list_transactions_by_project_and_partner(project_id, partner.id)
        transactions.extend(partner_transactions)
        positions.append(PartnerPosition(
            partner_id=partner.id,
            current_balance=_to_decimal(partner.current_balance),
            net_paid=calculate_net_paid(partner_transactions)
        ))
    return partners, positions, transactions


def preview_settlements(
    project_id: int,
    store: SettlementStore,
    epsilon: Optional[Decimal] = None
) -> SettlementCalculation:
    """Calculate settlements for a project without persisting anything."""
    _, positions, _ = _load_positions(project_id, store)
    return compute_settlements(project_id, positions, epsilon=epsilon)


def _build_summary(calculation: SettlementCalculation, names: dict) -> str:
    currency = settings.DEFAULT_CURRENCY
    summary_lines = [
        f"Partners: {calculation.partner_count}",
        f"Average net paid: {calculation.average_net_paid.quantize(CENTS, rounding=ROUND_HALF_UP)} {currency}",
        "\nNet paid:",
    ]
    for position in calculation.positions:
        summary_lines.append(f"  {names.get(position.partner_id, position.partner_id)}: {position.net_paid:.2f} {currency}")
    summary_lines.append("\nSettlements:")
    for draft in calculation.settlements:
        summary_lines.append(
            f"  {names.get(draft.partner_id, draft.partner_id)}: {draft.payment_amount} {currency} {draft.notes}"
        )
    return "\n".join(summary_lines)


def calculate_settlements(
    project_id: int,
    store: SettlementStore,
    epsilon: Optional[Decimal] = None
) -> List[Settlement]:
    """
    Calculate and persist settlements for a project.

    The run is applied in a single transaction: settlements are stored,
    each settled partner's balance moves to the settlement's final balance,
    and every transaction counted is tagged with the run so later runs
    skip it. Any failure rolls the whole run back.
    """
    partners, positions, transactions = _load_positions(project_id, store)

    if len(partners) < 2:
        logger.info(f"Project {project_id} has {len(partners)} partner(s); nothing to settle")
        return []

    calculation = compute_settlements(project_id, positions, epsilon=epsilon)

    if not calculation.settlements and not transactions:
        logger.info(f"Project {project_id} has no unsettled transactions")
        return []

    partner_map = {partner.id: partner for partner in partners}
    names = {partner.id: partner.name for partner in partners}

    try:
        run = store.save_run(SettlementRun(
            project_id=project_id,
            partner_count=calculation.partner_count,
            transaction_count=len(transactions),
            average_net_paid=calculation.average_net_paid.quantize(CENTS, rounding=ROUND_HALF_UP),
            calculation_data={
                "average_net_paid": str(calculation.average_net_paid),
                "epsilon": str(epsilon if epsilon is not None else settings.SETTLEMENT_EPSILON),
                "positions": [
                    {
                        "partner_id": p.partner_id,
                        "net_paid": str(p.net_paid),
                        "deviation": str(p.deviation),
                    }
                    for p in calculation.positions
                ],
            },
            summary=_build_summary(calculation, names)
        ))

        settlements = []
        for draft in calculation.settlements:
            settlement = store.save_settlement(Settlement(
                partner_id=draft.partner_id,
                linked_project_id=draft.linked_project_id,
                settlement_run_id=run.id,
                payment_amount=draft.payment_amount,
                previous_balance=draft.previous_balance,
                outstanding_amount=draft.outstanding_amount,
                final_balance=draft.final_balance,
                date=draft.date,
                notes=draft.notes
            ))
            settlements.append(settlement)

            partner = partner_map[draft.partner_id]
            partner.previous_balance = draft.previous_balance
            partner.current_balance = draft.final_balance

        for transaction in transactions:
            transaction.settlement_run_id = run.id

        store.commit()
    except Exception:
        logger.error(f"Settlement run for project {project_id} failed; rolling back", exc_info=True)
        store.rollback()
        raise

    for settlement in settlements:
        store.refresh(settlement)

    logger.info(
        f"Settlement run {run.id} for project {project_id}: {calculation.partner_count} partners, "
        f"average {calculation.average_net_paid:.2f}, {len(settlements)} settlement(s), "
        f"{len(transactions)} transaction(s) consumed"
    )
    return settlements
