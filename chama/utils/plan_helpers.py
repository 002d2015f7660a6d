from typing import List

from chama.models.personal_plan import PersonalPlan
from chama.schemas.personal_plan import CategoryUsage, PersonalPlanSummary, SpendingCategory

OVERSPEND_THRESHOLD = 120  # percent of the planned amount


def category_usage(category: SpendingCategory) -> CategoryUsage:
    planned, actual = category.planned_amount, category.actual_amount
    percentage = actual / planned * 100 if planned else 0.0
    if percentage > OVERSPEND_THRESHOLD:
        status = "over"
    elif percentage >= 100:
        status = "at_limit"
    else:
        status = "on_track"
    return CategoryUsage(
        id=category.id,
        name=category.name,
        planned_amount=planned,
        actual_amount=actual,
        percentage=round(percentage, 1),
        status=status,
    )


def summarize_plan(plan: PersonalPlan) -> PersonalPlanSummary:
    categories: List[SpendingCategory] = [SpendingCategory.model_validate(c) for c in plan.categories]
    usages = [category_usage(c) for c in categories]

    total_planned = sum(c.planned_amount for c in categories)
    total_actual = sum(c.actual_amount for c in categories)

    top = sorted(usages, key=lambda u: u.actual_amount, reverse=True)[:3]
    top_share = top[0].actual_amount / total_actual * 100 if top and total_actual > 0 else 0.0

    return PersonalPlanSummary(
        plan_id=plan.id,
        weekly_income=plan.weekly_income,
        total_planned=total_planned,
        total_actual=total_actual,
        remaining=plan.weekly_income - total_planned,
        personal_savings=plan.personal_savings,
        categories=usages,
        top_categories=top,
        top_category_share=round(top_share, 1),
    )
