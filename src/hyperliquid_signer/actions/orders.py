"""
Order, cancel and modify action builders (L1 category).

Wire key order is fixed: an order is ``a, b, p, s, r, t`` followed by an
optional ``c``; an order action is ``type, orders, grouping`` followed by an
optional ``builder``.
"""

from typing import Iterable, List, Optional, Union

from ..schemas.orders import (
    BuilderInfo,
    CancelByCloidRequest,
    CancelRequest,
    Cloid,
    Grouping,
    LimitOrderType,
    ModifyRequest,
    OrderRequest,
    TriggerOrderType,
)
from ..wire.numeric import to_wire_string
from ..wire.values import Action


def order_type_to_wire(order_type: Union[LimitOrderType, TriggerOrderType]) -> Action:
    if isinstance(order_type, LimitOrderType):
        return Action().set("limit", Action().set("tif", order_type.tif.value))
    if isinstance(order_type, TriggerOrderType):
        trigger = (
            Action()
            .set("isMarket", order_type.is_market)
            .set("triggerPx", to_wire_string(order_type.trigger_px))
            .set("tpsl", order_type.tpsl.value)
        )
        return Action().set("trigger", trigger)
    raise ValueError(f"unsupported order type: {order_type!r}")


def order_request_to_order_wire(order: OrderRequest) -> Action:
    wire = (
        Action()
        .set("a", order.asset)
        .set("b", order.is_buy)
        .set("p", to_wire_string(order.limit_px))
        .set("s", to_wire_string(order.sz))
        .set("r", order.reduce_only)
        .set("t", order_type_to_wire(order.order_type))
    )
    if order.cloid is not None:
        wire.set("c", order.cloid.to_raw())
    return wire


def order_wires_to_order_action(
    order_wires: Iterable[Action],
    builder: Optional[BuilderInfo] = None,
    grouping: Grouping = Grouping.NA,
) -> Action:
    action = (
        Action()
        .set("type", "order")
        .set("orders", list(order_wires))
        .set("grouping", Grouping(grouping).value)
    )
    if builder is not None:
        action.set("builder", Action().set("b", builder.builder).set("f", builder.fee))
    return action


def order_action(
    orders: Iterable[OrderRequest],
    builder: Optional[BuilderInfo] = None,
    grouping: Grouping = Grouping.NA,
) -> Action:
    """Convert order requests and wrap them in a single ``order`` action."""
    return order_wires_to_order_action(
        [order_request_to_order_wire(order) for order in orders],
        builder=builder,
        grouping=grouping,
    )


def cancel_action(cancels: Iterable[CancelRequest]) -> Action:
    return (
        Action()
        .set("type", "cancel")
        .set("cancels", [Action().set("a", c.asset).set("o", c.oid) for c in cancels])
    )


def cancel_by_cloid_action(cancels: Iterable[CancelByCloidRequest]) -> Action:
    return (
        Action()
        .set("type", "cancelByCloid")
        .set("cancels", [Action().set("asset", c.asset).set("cloid", c.cloid.to_raw()) for c in cancels])
    )


def _modify_wire(modify: ModifyRequest) -> Action:
    oid = modify.oid.to_raw() if isinstance(modify.oid, Cloid) else modify.oid
    return Action().set("oid", oid).set("order", order_request_to_order_wire(modify.order))


def batch_modify_action(modifies: Iterable[ModifyRequest]) -> Action:
    modify_wires: List[Action] = [_modify_wire(m) for m in modifies]
    return Action().set("type", "batchModify").set("modifies", modify_wires)


def modify_action(modify: ModifyRequest) -> Action:
    return batch_modify_action([modify])


def schedule_cancel_action(time: Optional[int] = None) -> Action:
    """
    Schedule (or, with ``time=None``, clear) a dead man's switch cancel.

    ``time`` is omitted from the action entirely when not given.
    """
    action = Action().set("type", "scheduleCancel")
    if time is not None:
        action.set("time", time)
    return action
