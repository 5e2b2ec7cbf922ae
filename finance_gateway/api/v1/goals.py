"""Goal endpoints - CRUD plus completion percentage"""

import logging
from datetime import date
from typing import Optional
from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from finance_gateway.api.v1.schemas import GoalListResponse, GoalRequest, GoalSchema
from finance_gateway.api.dependencies import get_goal_repository
from finance_gateway.domain.exceptions import InvalidAmountError, InvalidTargetError
from finance_gateway.domain.models import Goal
from finance_gateway.domain.status import classify_goal
from finance_gateway.domain.validation import validate_goal
from finance_gateway.infrastructure.database.session import get_db

router = APIRouter()


def _to_domain(body: GoalRequest, goal_id: Optional[int] = None) -> Goal:
    goal = Goal(
        id=goal_id,
        name=body.name.strip(),
        target=body.target,
        current=body.current,
        target_date=body.target_date,
        category=body.category,
    )
    validate_goal(goal)
    return goal


def _to_schema(goal: Goal) -> GoalSchema:
    schema = GoalSchema(
        id=goal.id,
        name=goal.name,
        target=goal.target,
        current=goal.current,
        target_date=goal.target_date,
        category=goal.category,
    )
    try:
        schema.percentage = classify_goal(goal.target, goal.current).percentage
    except (InvalidTargetError, InvalidAmountError) as e:
        logging.warning(f"Unclassifiable goal {goal.id}: {e}")
        schema.error = str(e)
    return schema


@router.get("/goals", response_model=GoalListResponse)
async def list_goals(repository=Depends(get_goal_repository)):
    """Goals by target date (undated last), each with its completion percentage"""
    goals = await repository.list()
    goals = sorted(goals, key=lambda g: (g.target_date is None, g.target_date or date.min))
    return GoalListResponse(goals=[_to_schema(g) for g in goals])


@router.post("/goals", response_model=GoalSchema, status_code=201)
async def create_goal(
    body: GoalRequest,
    repository=Depends(get_goal_repository),
    db: Session = Depends(get_db),
):
    created = await repository.create(_to_domain(body))
    db.commit()
    return _to_schema(created)


@router.put("/goals/{goal_id}", response_model=GoalSchema)
async def update_goal(
    goal_id: int,
    body: GoalRequest,
    repository=Depends(get_goal_repository),
    db: Session = Depends(get_db),
):
    updated = await repository.update(_to_domain(body, goal_id))
    db.commit()
    return _to_schema(updated)


@router.delete("/goals/{goal_id}", status_code=204)
async def delete_goal(
    goal_id: int,
    repository=Depends(get_goal_repository),
    db: Session = Depends(get_db),
):
    await repository.delete(goal_id)
    db.commit()
    return Response(status_code=204)
