"""Board endpoints"""
from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from taskflow.database import get_db
from taskflow.dependencies import get_current_user_id
from taskflow.errors import NotFoundOrUnownedError
from taskflow.schemas import BoardCreate, BoardResponse, BoardSummary, BoardUpdate
from taskflow.services import boards

router = APIRouter()


@router.get("", response_model=List[BoardSummary])
def list_boards(
    db: Session = Depends(get_db),
    current_user_id: int = Depends(get_current_user_id),
):
    """List the caller's boards, newest first."""
    return boards.list_boards(db, current_user_id)


@router.get("/{board_id}", response_model=BoardResponse)
def get_board(
    board_id: int,
    db: Session = Depends(get_db),
    current_user_id: int = Depends(get_current_user_id),
):
    """Return a board with its columns and tasks."""
    board = boards.get_board(db, board_id, current_user_id)
    if board is None:
        raise NotFoundOrUnownedError("Board", board_id)
    return board


@router.post("", response_model=BoardResponse, status_code=status.HTTP_201_CREATED)
def create_board(
    board_in: BoardCreate,
    db: Session = Depends(get_db),
    current_user_id: int = Depends(get_current_user_id),
):
    """Create a board seeded with the default columns."""
    return boards.create_board(db, board_in.name, current_user_id)


@router.put("/{board_id}", response_model=BoardSummary)
def update_board(
    board_id: int,
    board_in: BoardUpdate,
    db: Session = Depends(get_db),
    current_user_id: int = Depends(get_current_user_id),
):
    board = boards.rename_board(db, board_id, board_in.name, current_user_id)
    if board is None:
        raise NotFoundOrUnownedError("Board", board_id)
    return board


@router.delete("/{board_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_board(
    board_id: int,
    db: Session = Depends(get_db),
    current_user_id: int = Depends(get_current_user_id),
):
    if not boards.delete_board(db, board_id, current_user_id):
        raise NotFoundOrUnownedError("Board", board_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
