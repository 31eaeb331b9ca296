"""Skill catalog endpoint used to populate the skill picker and filter."""

from fastapi import APIRouter

from resume_backend.core.constants import SKILL_CATALOG

router = APIRouter()


@router.get("/skills", response_model=list[str])
async def skill_catalog() -> list[str]:
    return list(SKILL_CATALOG)
