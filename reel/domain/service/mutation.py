"""Optimistic mutation functions.

Every function here is pure: it takes an entity or an immutable
collection (tuple) and returns a new one, leaving its inputs untouched.
Use cases pair each forward change with its compensating change
(restore the previous entity, drop the placeholder, restore a snapshot),
so apply and rollback can be tested without any I/O.

Collections may be nested: a review holds replies, a post holds comments,
a comment holds replies. Lookups by id descend into children, so a reply
can be updated through the list of reviews that contains it.
"""

from collections.abc import Callable, Sequence
from datetime import datetime
from typing import Any, TypeVar

from reel.domain.model import (
    Reply,
    UserRef,
    VotableEntity,
    VoteSummary,
)
from reel.domain.value import (
    TEMP_ID_PREFIX,
    InsertPosition,
    UserId,
    VoteAction,
    is_temp_id,
    new_temp_id,
)

V = TypeVar("V", bound=VotableEntity)

Collection = tuple[VotableEntity, ...]
Predicate = Callable[[VotableEntity], bool]


# Votes


def toggle_like(entity: V, user_id: UserId) -> V:
    """Toggle the user's like, clearing any dislike they hold."""
    dislikes = entity.dislikes - {user_id}
    if user_id in entity.likes:
        likes = entity.likes - {user_id}
    else:
        likes = entity.likes | {user_id}
    return entity.model_copy(update={"likes": likes, "dislikes": dislikes})


def toggle_dislike(entity: V, user_id: UserId) -> V:
    """Toggle the user's dislike, clearing any like they hold."""
    likes = entity.likes - {user_id}
    if user_id in entity.dislikes:
        dislikes = entity.dislikes - {user_id}
    else:
        dislikes = entity.dislikes | {user_id}
    return entity.model_copy(update={"likes": likes, "dislikes": dislikes})


def apply_vote(entity: V, action: VoteAction, user_id: UserId) -> V:
    """Apply a like or dislike toggle."""
    if action == VoteAction.LIKE:
        return toggle_like(entity, user_id)
    return toggle_dislike(entity, user_id)


def apply_vote_summary(entity: V, summary: VoteSummary, user_id: UserId) -> V:
    """Set the user's membership to what the server reports.

    Other members are kept as they are; a summary only carries totals
    for them.
    """
    likes = entity.likes - {user_id}
    dislikes = entity.dislikes - {user_id}
    if summary.user_liked:
        likes = likes | {user_id}
    if summary.user_disliked:
        dislikes = dislikes | {user_id}
    return entity.model_copy(update={"likes": likes, "dislikes": dislikes})


def restore_vote(entity: V, original: VotableEntity, user_id: UserId) -> V:
    """Put the user's membership back to what it was on ``original``.

    Only the user's own vote is reverted, so changes other actions made
    to the entity in the meantime survive the rollback.
    """
    likes = entity.likes - {user_id}
    dislikes = entity.dislikes - {user_id}
    if user_id in original.likes:
        likes = likes | {user_id}
    if user_id in original.dislikes:
        dislikes = dislikes | {user_id}
    return entity.model_copy(update={"likes": likes, "dislikes": dislikes})


# Placeholders


def make_placeholder(
    model: type[V],
    author: UserRef,
    content: str,
    prefix: str = TEMP_ID_PREFIX,
    **fields: Any,
) -> V:
    """Build an unconfirmed entity for the current user with a temporary id."""
    now = datetime.now()
    return model(
        id=new_temp_id(prefix),
        user=author,
        content=content,
        likes=frozenset(),
        dislikes=frozenset(),
        created_at=now,
        updated_at=now,
        **fields,
    )


def insert_optimistic(
    collection: Sequence[V],
    placeholder: V,
    position: InsertPosition = InsertPosition.APPEND,
) -> tuple[V, ...]:
    """Insert a placeholder at the collection's display end."""
    if position == InsertPosition.PREPEND:
        return (placeholder, *collection)
    return (*collection, placeholder)


def insert_child_optimistic(
    parent: V,
    child: VotableEntity,
    position: InsertPosition = InsertPosition.APPEND,
) -> V:
    """Insert a placeholder under a threaded parent and bump its cached count."""
    field, count_field = _child_fields(parent)
    children = insert_optimistic(getattr(parent, field), child, position)
    update: dict[str, Any] = {field: children}
    if count_field:
        update[count_field] = getattr(parent, count_field) + 1
    return parent.model_copy(update=update)


def make_reply_placeholder(
    author: UserRef, content: str, prefix: str = TEMP_ID_PREFIX, spoiler: bool = False
) -> Reply:
    return make_placeholder(Reply, author, content, prefix, spoiler=spoiler)


# Lookup and replacement


def find(collection: Sequence[VotableEntity], entity_id: str) -> VotableEntity | None:
    """Find an entity by id anywhere in the collection, children included."""
    for entity in collection:
        if entity.id == entity_id:
            return entity
        field = entity.children_field
        if field:
            found = find(getattr(entity, field), entity_id)
            if found is not None:
                return found
    return None


def update_where(
    collection: Sequence[V],
    entity_id: str,
    fn: Callable[[Any], VotableEntity],
) -> tuple[V, ...]:
    """Apply ``fn`` to the entity with ``entity_id``, wherever it is nested."""
    return tuple(_update(entity, entity_id, fn) for entity in collection)


def _update(entity: V, entity_id: str, fn: Callable[[Any], VotableEntity]) -> V:
    if entity.id == entity_id:
        return fn(entity)
    field = entity.children_field
    if not field:
        return entity
    children = getattr(entity, field)
    updated = update_where(children, entity_id, fn)
    if all(a is b for a, b in zip(children, updated)):
        return entity
    return entity.model_copy(update={field: updated})


def replace(collection: Sequence[V], entity: VotableEntity) -> tuple[V, ...]:
    """Replace the entity with the same id (edit, or server-confirmed copy)."""
    return update_where(collection, entity.id, lambda _: entity)


def replace_known(
    collection: Sequence[V], fresh: Sequence[VotableEntity]
) -> tuple[V, ...]:
    """Replace every entity that also appears in ``fresh``; ignore the rest."""
    result = tuple(collection)
    for entity in fresh:
        result = replace(result, entity)
    return result


def reconcile(
    collection: Sequence[V], temp_id: str, server_entity: VotableEntity
) -> tuple[V, ...]:
    """Swap a placeholder for the server-confirmed entity.

    No-op when the placeholder is gone (the user already removed it), so
    a late confirmation never resurrects a cancelled action.
    """
    return update_where(collection, temp_id, lambda _: server_entity)


# Removal and rollback


def rollback(
    collection: Sequence[V],
    snapshot_or_predicate: Sequence[V] | Predicate,
) -> tuple[V, ...]:
    """Undo optimistic changes.

    With a snapshot (a previously captured collection) the snapshot is
    restored as-is. With a predicate, every matching entity is removed,
    children included, and the cached counts of their parents are
    decremented.
    """
    if callable(snapshot_or_predicate):
        return _remove_matching(collection, snapshot_or_predicate)
    return tuple(snapshot_or_predicate)


def remove(collection: Sequence[V], entity_id: str) -> tuple[V, ...]:
    """Remove one entity by id, wherever it is nested."""
    return rollback(collection, lambda entity: entity.id == entity_id)


def drop_placeholders(
    collection: Sequence[V], prefix: str = TEMP_ID_PREFIX
) -> tuple[V, ...]:
    """Remove every unconfirmed placeholder."""
    return rollback(collection, lambda entity: is_temp_id(entity.id, prefix))


def _remove_matching(collection: Sequence[V], predicate: Predicate) -> tuple[V, ...]:
    kept = []
    for entity in collection:
        if predicate(entity):
            continue
        kept.append(_remove_children(entity, predicate))
    return tuple(kept)


def _remove_children(entity: V, predicate: Predicate) -> V:
    field = entity.children_field
    if not field:
        return entity
    children = getattr(entity, field)
    remaining = _remove_matching(children, predicate)
    removed = len(children) - len(remaining)
    if removed == 0 and all(a is b for a, b in zip(children, remaining)):
        return entity
    update: dict[str, Any] = {field: remaining}
    count_field = entity.count_field
    if removed and count_field:
        update[count_field] = max(0, getattr(entity, count_field) - removed)
    return entity.model_copy(update=update)


def _child_fields(parent: VotableEntity) -> tuple[str, str | None]:
    field = parent.children_field
    if not field:
        raise TypeError(f"{type(parent).__name__} has no child collection")
    return field, parent.count_field
