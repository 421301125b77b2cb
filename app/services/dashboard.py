"""Dashboard aggregation: per-company counts over position descriptions, responsibilities and users."""

import math
from datetime import UTC, datetime, timedelta

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.models import PositionDescription, Responsibility, User
from app.schemas.dashboard import DashboardResponse, RecentUpload, TopRole

RECENT_WINDOW_DAYS = 30
TOP_ROLES_LIMIT = 5
RECENT_UPLOADS_LIMIT = 5
NO_DEPARTMENT = "N/A"


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values (2.5 -> 3), unlike round()."""
    return int(math.floor(value + 0.5))


def percent_of(part: int, whole: int) -> int:
    """Whole-number percentage of part in whole; 0 when whole is 0."""
    if whole <= 0:
        return 0
    return round_half_up(part / whole * 100)


def count_with_percent(part: int, whole: int) -> str:
    """Format as 'N (P%)'."""
    return f"{part} ({percent_of(part, whole)}%)"


def score_as_percent(score: float | None) -> str:
    """Scores are stored as fractions (0.42) and shown as whole percentages ('42%')."""
    if score is None:
        return "0%"
    return f"{round_half_up(float(score) * 100)}%"


def _count(query) -> int:
    return int(query.scalar() or 0)


def build_dashboard(db: Session, company_id: int, now: datetime | None = None) -> DashboardResponse:
    """Run the aggregate queries for one company and assemble the dashboard payload."""
    now = now or datetime.now(UTC)
    pd = PositionDescription
    in_company = pd.company_id == company_id

    total_pds = _count(db.query(func.count(pd.id)).filter(in_company))
    this_month_pds = _count(
        db.query(func.count(pd.id)).filter(
            in_company, pd.upload_date >= now - timedelta(days=RECENT_WINDOW_DAYS)
        )
    )
    departments_covered = _count(
        db.query(func.count(func.distinct(pd.department))).filter(
            in_company, pd.department.isnot(None)
        )
    )

    dept_count = func.count(pd.id).label("count")
    most_active = (
        db.query(pd.department, dept_count)
        .filter(in_company, pd.department.isnot(None))
        .group_by(pd.department)
        .order_by(dept_count.desc())
        .first()
    )
    most_active_department = most_active[0] if most_active else NO_DEPARTMENT

    responsibilities = db.query(func.count(Responsibility.id)).join(
        pd, Responsibility.pd_id == pd.id
    )
    total_responsibilities = _count(responsibilities.filter(in_company))
    automatable = _count(
        responsibilities.filter(in_company, Responsibility.ai_automation_score > 0)
    )

    high_ai_potential = _count(
        db.query(func.count(pd.id)).filter(in_company, pd.ai_automation_score_sum > 0)
    )
    avg_score = (
        db.query(func.avg(pd.ai_automation_score_sum))
        .filter(in_company, pd.ai_automation_score_sum.isnot(None))
        .scalar()
    )

    active_users = _count(db.query(func.count(User.id)).filter(User.company_id == company_id))
    pending_review = _count(
        db.query(func.count(pd.id)).filter(in_company, pd.status == "In Review")
    )
    published = _count(db.query(func.count(pd.id)).filter(in_company, pd.status == "Published"))

    top_rows = (
        db.query(pd.title, pd.ai_automation_score_sum)
        .filter(in_company, pd.ai_automation_score_sum > 0)
        .order_by(pd.ai_automation_score_sum.desc())
        .limit(TOP_ROLES_LIMIT)
        .all()
    )
    recent_rows = (
        db.query(pd.title, pd.upload_date)
        .filter(in_company)
        .order_by(pd.upload_date.desc())
        .limit(RECENT_UPLOADS_LIMIT)
        .all()
    )

    return DashboardResponse(
        totalPDs=total_pds,
        thisMonthPDs=this_month_pds,
        departmentsCovered=departments_covered,
        mostActiveDepartment=most_active_department,
        totalResponsibilities=total_responsibilities,
        automatableResponsibilities=count_with_percent(automatable, total_responsibilities),
        highAIPotential=count_with_percent(high_ai_potential, total_pds),
        avgAIScore=score_as_percent(avg_score),
        activeUsers=active_users,
        pendingReview=pending_review,
        published=published,
        topRoles=[TopRole(role=title, score=score_as_percent(score)) for title, score in top_rows],
        recentUploads=[
            RecentUpload(title=title, date=uploaded.date().isoformat())
            for title, uploaded in recent_rows
        ],
    )
