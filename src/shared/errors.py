"""Error taxonomy shared by the Ordering and Payments domains.

Failures are reported with stable, resource-keyed codes rather than raw
strings so that callers can localize them. Two families exist:

- ``BusinessRuleViolation`` (a ``ValidationError``): a guard in an aggregate
  rejected the operation. Raised before any mutation.
- ``ResourceNotFound`` (an ``ObjectNotFoundError``): an identifier did not
  resolve through a repository.

Everything else is an infrastructure failure and propagates untouched.
"""

from protean.exceptions import ObjectNotFoundError, ValidationError

# ---------------------------------------------------------------------------
# Order codes
# ---------------------------------------------------------------------------
ORDER_NOT_FOUND = "Order_OrderNotFound"
ORDER_ITEM_NOT_FOUND = "Order_ItemNotFound"
ORDER_CANNOT_ADD_ITEM = "Order_CannotAddItemToNonPendingStatus"
ORDER_CANNOT_REMOVE_ITEM = "Order_CannotRemoveItemToNonPendingStatus"
ORDER_CANNOT_APPLY_DISCOUNT = "Order_CannotApplyDiscountToNonPendingStatus"
ORDER_INVALID_DISCOUNT = "Order_InvalidDiscount"
ORDER_INVALID_ITEMS = "Order_InvalidItems"
ORDER_INVALID_UNIT_PRICE = "Order_InvalidUnitPrice"
ORDER_DISCOUNT_EXCEEDS_SUBTOTAL = "Order_DiscountExceedsSubtotal"
ORDER_CANNOT_CANCEL = "Order_CannotCancelToNonPendingStatus"
ORDER_CANNOT_RECEIVE = "Order_CannotReceiveToNonPendingStatus"
ORDER_CANNOT_PREPARE = "Order_CannotPrepareToNonReceivedStatus"
ORDER_CANNOT_READY = "Order_CannotReadyToNonInPreparationStatus"
ORDER_CANNOT_DELIVER = "Order_CannotDeliverToNonReadyStatus"

# ---------------------------------------------------------------------------
# Payment codes
# ---------------------------------------------------------------------------
PAYMENT_NOT_FOUND = "Payment_PaymentNotFound"
PAYMENT_CANNOT_CONFIRM = "Payment_CannotConfirmToNonPendingStatus"
PAYMENT_CANNOT_FAIL = "Payment_CannotFailToNonPendingStatus"

# ---------------------------------------------------------------------------
# Generic codes
# ---------------------------------------------------------------------------
INVALID_INPUT = "Common_InvalidInput"
NOT_FOUND = "Common_NotFound"
INFRASTRUCTURE_FAILURE = "Common_InfrastructureFailure"

_DEFAULT_MESSAGES = {
    ORDER_NOT_FOUND: "Order not found",
    ORDER_ITEM_NOT_FOUND: "Item not found in order",
    ORDER_CANNOT_ADD_ITEM: "Cannot add item to non-pending order",
    ORDER_CANNOT_REMOVE_ITEM: "Cannot remove item from non-pending order",
    ORDER_CANNOT_APPLY_DISCOUNT: "Cannot apply discount to non-pending order",
    ORDER_INVALID_DISCOUNT: "Discount must be a finite, non-negative amount",
    ORDER_INVALID_ITEMS: "Items must be a list of product, quantity and unit price entries",
    ORDER_INVALID_UNIT_PRICE: "Unit price must be a finite amount",
    ORDER_DISCOUNT_EXCEEDS_SUBTOTAL: "Discount cannot exceed the order subtotal",
    ORDER_CANNOT_CANCEL: "Cannot cancel non-pending order",
    ORDER_CANNOT_RECEIVE: "Cannot receive non-pending order",
    ORDER_CANNOT_PREPARE: "Cannot prepare non-received order",
    ORDER_CANNOT_READY: "Cannot mark ready a non-in-preparation order",
    ORDER_CANNOT_DELIVER: "Cannot deliver non-ready order",
    PAYMENT_NOT_FOUND: "Payment not found",
    PAYMENT_CANNOT_CONFIRM: "Cannot confirm a failed payment",
    PAYMENT_CANNOT_FAIL: "Cannot fail a confirmed payment",
    INVALID_INPUT: "Invalid input",
    NOT_FOUND: "Resource not found",
    INFRASTRUCTURE_FAILURE: "The operation could not be completed",
}


def describe(code: str) -> str:
    """Return the default (English) text for an error code."""
    return _DEFAULT_MESSAGES.get(code, code)


class BusinessRuleViolation(ValidationError):
    """A business invariant rejected the requested operation."""

    def __init__(self, code: str, field: str = "status") -> None:
        self.code = code
        super().__init__({field: [code]})


class ResourceNotFound(ObjectNotFoundError):
    """A requested aggregate could not be located."""

    def __init__(self, code: str, identifier: str) -> None:
        self.code = code
        self.identifier = identifier
        super().__init__({"_entity": [code]})


def get_or_raise(repository, identifier, code: str):
    """Load an aggregate by id, translating a miss into ``ResourceNotFound``."""
    try:
        return repository.get(identifier)
    except ObjectNotFoundError as exc:
        raise ResourceNotFound(code, str(identifier)) from exc
