"""Fingerprints for the payloads collaborators deduplicate or stamp.

Each helper builds a plain payload and hashes it with
:func:`canonhash.canonical.canonicalize_and_hash`, so two requests that carry
the same data always map to the same key.
"""

from __future__ import annotations

import datetime as dt
import logging
from typing import Any

from canonhash.canonical import canonicalize_and_hash
from canonhash.config import Settings, settings
from canonhash.schemas import CompletionEvidence, InvoiceRequest, OrderProof, ReceiptInput
from canonhash.util import iso_millis, utc_now

LOGGER = logging.getLogger(__name__)


def order_proof(
    order_id: int,
    evidence: CompletionEvidence,
    now: dt.datetime | None = None,
    cfg: Settings | None = None,
) -> OrderProof:
    """Build the completion proof for an order and its hash.

    Missing evidence fields are recorded as ``null`` (``[]`` for photos);
    photos are sorted so upload order does not change the proof.
    """
    cfg = cfg or settings
    payload = {
        "orderId": order_id,
        "completedAt": evidence.completed_at or iso_millis(now or utc_now()),
        "coords": evidence.coords.model_dump() if evidence.coords else None,
        "photos": sorted(evidence.photos) if evidence.photos is not None else [],
        "notes": evidence.notes or None,
    }
    proof_hash = canonicalize_and_hash(payload, scope=cfg.cycle_scope)
    LOGGER.debug("order %s proof hash %s", order_id, proof_hash)
    return OrderProof(payload=payload, proof_hash=proof_hash)


def receipt_hash(receipt: ReceiptInput, cfg: Settings | None = None) -> str:
    cfg = cfg or settings
    payload = {
        "paymentId": receipt.payment_id,
        "orderId": receipt.order_id,
        "amount": receipt.amount,
        "currency": receipt.currency if receipt.currency is not None else cfg.default_currency,
        "txHash": receipt.tx_hash,
        "completedAt": iso_millis(receipt.completed_at or receipt.created_at),
    }
    h = canonicalize_and_hash(payload, scope=cfg.cycle_scope)
    LOGGER.debug("payment %s receipt hash %s", receipt.payment_id, h)
    return h


def invoice_fingerprint(req: InvoiceRequest, cfg: Settings | None = None) -> str:
    # idempotency key for a pending invoice: same order, amount, currency and
    # purpose within the reuse window resolve to the same payment
    cfg = cfg or settings
    payload = {
        "orderId": req.order_id,
        "amount": req.amount,
        "currency": req.currency or cfg.default_currency,
        "purpose": req.purpose or cfg.default_purpose,
    }
    fp = canonicalize_and_hash(payload, scope=cfg.cycle_scope)
    LOGGER.debug("order %s invoice fingerprint %s", req.order_id, fp)
    return fp


def job_fingerprint(queue: str, data: Any, cfg: Settings | None = None) -> str:
    if not queue:
        raise ValueError("queue name must not be empty")
    cfg = cfg or settings
    fp = canonicalize_and_hash({"queue": queue, "data": data}, scope=cfg.cycle_scope)
    LOGGER.debug("queue %s job fingerprint %s", queue, fp)
    return fp
