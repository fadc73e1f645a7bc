from typing import Any

from fastapi import HTTPException, status

from ..services.storage import DeletableRepository, Repository


def not_found(repository: Repository) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND, detail=f"{repository.label} not found"
    )


def get_or_404(repository: Repository, record_id: int) -> Any:
    record = repository.get(record_id)
    if record is None:
        raise not_found(repository)
    return record


def update_or_404(repository: Repository, record_id: int, changes: dict) -> Any:
    record = repository.update(record_id, changes)
    if record is None:
        raise not_found(repository)
    return record


def delete_or_404(repository: DeletableRepository, record_id: int) -> None:
    if not repository.delete(record_id):
        raise not_found(repository)
