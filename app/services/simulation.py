# services/simulation.py
import json
import logging
import re
from datetime import datetime, timezone
from typing import List
from uuid import UUID

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import Session

from app.core.exceptions import InsightGenerationError, NotFoundError, ValidationError
from app.crud.habit_log import crud_habit_log
from app.crud.simulation import crud_simulation
from app.engine.domains import Domain
from app.models.habit_log import HabitLog
from app.models.simulation import Simulation
from app.models.user_profile import UserProfile
from app.schemas.simulation import Projection
from app.services.insight_client import InsightClient

logger = logging.getLogger(__name__)

# Logs loaded per request; only the most recent PROMPT_LOGS go in the prompt.
HISTORY_LOGS = 30
PROMPT_LOGS = 14
GENERATED_BY = "AI (Mistral 7B)"

CODE_FENCE = re.compile(r"```(?:json)?\s*|\s*```")

PROMPT_TEMPLATE = """You are a personal development AI coach analyzing habit tracking data.

Domain: {domain}
Recent habit data (last {days} days): {habits}

Analyze this data and provide:
1. Current trend (improving/stable/declining)
2. A brief prediction about their progress
3. What will happen if they continue this pattern (future outcome in 30 days)
4. 3-4 specific, actionable suggestions for improvement

Respond ONLY with a valid JSON object in this exact format:
{{
  "trend": "improving" or "stable" or "declining",
  "prediction": "string",
  "futureOutcome": "string",
  "suggestions": ["string", "string", "string"],
  "dataPoints": number
}}

Be encouraging but honest. Focus on the specific domain. Do not use markdown."""


# =====================================================================
# PROMPT HELPERS
# =====================================================================

def summarize_logs(logs: List[HabitLog]) -> List[dict]:
    """Compact per-day view of the logs, keeping every metric field."""
    return [
        {
            "date": log.date.isoformat(),
            "sleep": log.sleep_hours,
            "exercise": log.exercise_minutes,
            "mood": log.mood,
            "study": log.study_hours,
            "food": log.food_quality,
            "spending": log.spending,
            "leisure": log.leisure_hours,
            "social": log.social_count,
            "relationshipTime": log.quality_time,
            "connectionQuality": log.connection_quality,
        }
        for log in logs
    ]


def build_prompt(domain: Domain, logs: List[HabitLog]) -> str:
    recent = logs[:PROMPT_LOGS]
    return PROMPT_TEMPLATE.format(
        domain=domain.value,
        days=PROMPT_LOGS,
        habits=json.dumps(summarize_logs(recent)),
    )


def parse_projection(reply: str) -> Projection:
    """
    Turn the model's reply into a Projection.

    Raises:
        InsightGenerationError: Reply is not the expected JSON object
    """
    cleaned = CODE_FENCE.sub("", reply).strip()
    try:
        payload = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        logger.warning(f"Unparsable insight reply: {reply[:200]!r}")
        raise InsightGenerationError("Failed to parse AI response") from exc

    if not isinstance(payload, dict):
        raise InsightGenerationError("Failed to parse AI response")

    try:
        return Projection.model_validate(payload)
    except PydanticValidationError as exc:
        logger.warning(f"Insight reply has the wrong shape: {exc.error_count()} errors")
        raise InsightGenerationError("AI response is missing required fields") from exc


# =====================================================================
# SERVICE CLASS
# =====================================================================

class SimulationService:
    """Service layer for AI-generated domain insights."""

    def __init__(self):
        self.crud = crud_simulation

    def generate(
        self,
        db: Session,
        *,
        user: UserProfile,
        domain: Domain,
        client: InsightClient,
    ) -> Simulation:
        """
        Ask the completion endpoint for a 30-day projection of one domain
        and store it.

        Nothing is stored unless the reply parses.

        Raises:
            ValidationError: No logs for the domain yet
            InsightGenerationError: The endpoint failed or replied nonsense
        """
        logs = crud_habit_log.get_by_user(
            db, user_id=user.id, domain=domain, limit=HISTORY_LOGS
        )
        if not logs:
            raise ValidationError(f"Log some {domain.value} habits first")

        reply = client.complete(build_prompt(domain, logs))
        projection = parse_projection(reply)
        projection.data_points = len(logs)
        projection.last_updated = datetime.now(timezone.utc)
        projection.generated_by = GENERATED_BY

        simulation = self.crud.create(
            db,
            user_id=user.id,
            domain=domain,
            projection=projection.model_dump(mode="json"),
        )
        logger.info(
            f"Stored {projection.trend} insight {simulation.id} for user {user.id} "
            f"({domain.value}, {len(logs)} logs)"
        )
        return simulation

    def list_for_user(self, db: Session, user: UserProfile) -> List[Simulation]:
        return self.crud.get_by_user_id(db, user.id)

    def delete(self, db: Session, simulation_id: UUID, user: UserProfile) -> None:
        simulation = self.crud.get_for_user(db, id=simulation_id, user_id=user.id)
        if not simulation:
            raise NotFoundError("Insight not found")
        self.crud.delete(db, db_obj=simulation)

    def clear(self, db: Session, user: UserProfile) -> int:
        deleted = self.crud.delete_by_user_id(db, user_id=user.id)
        logger.info(f"Cleared {deleted} insights for user {user.id}")
        return deleted


# =====================================================================
# SINGLETON INSTANCE
# =====================================================================

simulation_service = SimulationService()
