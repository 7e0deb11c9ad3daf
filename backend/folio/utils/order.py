from sqlalchemy import func, select, update

from folio.domain.invariants.positions import assert_contiguous
from folio.domain.positions import PositionShift, plan_removal, plan_reorder


def count_in_scope(session, model, scope_id) -> int:
    stmt = select(func.count(model.id)).where(model.scope_column() == scope_id)
    return session.scalar(stmt) or 0


def scope_positions(session, model, scope_id) -> list[int]:
    stmt = (
        select(model.position)
        .where(model.scope_column() == scope_id)
        .order_by(model.position.asc())
    )
    return list(session.scalars(stmt))


def shift_positions(session, model, scope_id, shift: PositionShift) -> int:
    """
    Applies a planned shift to every sibling in range with one UPDATE.
    Returns the number of rows moved.
    """
    stmt = update(model).where(
        model.scope_column() == scope_id,
        model.position >= shift.lower,
    )
    if shift.upper is not None:
        stmt = stmt.where(model.position <= shift.upper)

    stmt = stmt.values(position=model.position + shift.delta).execution_options(
        synchronize_session="fetch"
    )
    return session.execute(stmt).rowcount


def apply_reorder(session, entity, target: int) -> bool:
    """
    Moves ``entity`` to ``target`` within its scope, shifting the siblings in
    between. Returns False when the entity was already there.
    """
    model = type(entity)
    count = count_in_scope(session, model, entity.scope_id)

    shift = plan_reorder(entity.position, target, count)
    if shift is None:
        return False

    shift_positions(session, model, entity.scope_id, shift)
    entity.position = target
    session.flush()
    return True


def close_gap(session, model, scope_id, removed_position: int) -> int:
    """Re-compacts a scope after the child at ``removed_position`` was deleted."""
    return shift_positions(session, model, scope_id, plan_removal(removed_position))


def assert_scope_contiguous(session, model, scope_id) -> None:
    session.flush()
    assert_contiguous(
        scope_positions(session, model, scope_id),
        scope=f"{model.__name__} {scope_id}",
    )
