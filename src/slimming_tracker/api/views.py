"""camelCase JSON views of domain objects.

Each view lists its fields explicitly so storage names never leak into the
API by accident.
"""

from slimming_tracker.domain.diary import DailySummary, DiaryEntry
from slimming_tracker.domain.foods import Food
from slimming_tracker.domain.models import UserProfile, UserRecord
from slimming_tracker.domain.nutrition import (
    NutritionFacts,
    ProductResult,
    ProductSearchPage,
)
from slimming_tracker.domain.weight import WeightLog
from slimming_tracker.services.migrations import MigrationReport, SynCorrection


def food_view(food: Food) -> dict[str, object]:
    return {
        "id": str(food.id),
        "name": food.name,
        "synValue": food.syn_value,
        "isFreeFood": food.is_free_food,
        "isSpeedFood": food.is_speed_food,
        "healthyExtraType": food.healthy_extra_type,
        "portionSize": food.portion_size,
        "portionUnit": food.portion_unit,
        "category": food.category,
        "barcode": food.barcode,
        "createdBy": str(food.created_by) if food.created_by else None,
        "createdAt": food.created_at.isoformat() if food.created_at else None,
    }


def nutrition_view(nutrition: NutritionFacts) -> dict[str, float]:
    return {
        "calories": nutrition.calories,
        "saturatedFat": nutrition.saturated_fat,
        "sugars": nutrition.sugars,
        "protein": nutrition.protein,
        "carbs": nutrition.carbs,
        "fat": nutrition.fat,
        "fiber": nutrition.fiber,
        "salt": nutrition.salt,
    }


def product_view(product: ProductResult) -> dict[str, object]:
    """Product card as shown by the scanner and search screens."""
    classification = product.classification
    return {
        "barcode": product.barcode,
        "name": product.display_name,
        "synValue": classification.syn_value,
        "isFreeFood": classification.is_free_food,
        "isSpeedFood": classification.is_speed_food,
        "portionSize": classification.portion_size_grams,
        "nutrition": nutrition_view(product.nutrition),
        "image": product.image_url,
        "servingSize": product.serving_size,
        "categories": product.categories,
    }


def search_page_view(page: ProductSearchPage) -> dict[str, object]:
    return {
        "products": [product_view(product) for product in page.products],
        "count": page.count,
        "page": page.page,
        "pageSize": page.page_size,
    }


def entry_view(entry: DiaryEntry) -> dict[str, object]:
    return {
        "id": str(entry.id),
        "userId": str(entry.user_id),
        "date": entry.date.isoformat(),
        "mealType": entry.meal_type,
        "foodId": str(entry.food_id),
        "quantity": entry.quantity,
        "synValueConsumed": entry.syn_value_consumed,
        "isHealthyExtra": entry.is_healthy_extra,
        "createdAt": entry.created_at.isoformat() if entry.created_at else None,
        "food": food_view(entry.food) if entry.food else None,
    }


def summary_view(summary: DailySummary) -> dict[str, object]:
    return {
        "date": summary.date.isoformat(),
        "totalSyns": summary.total_syns,
        "remainingSyns": summary.remaining_syns,
        "healthyExtraAUsed": summary.healthy_extra_a_used,
        "healthyExtraBUsed": summary.healthy_extra_b_used,
        "healthyExtraCUsed": summary.healthy_extra_c_used,
        "healthyExtraACount": summary.healthy_extra_a_count,
        "healthyExtraBCount": summary.healthy_extra_b_count,
        "healthyExtraCCount": summary.healthy_extra_c_count,
        "speedFoodsCount": summary.speed_foods_count,
        "entries": [entry_view(entry) for entry in summary.entries],
    }


def weight_view(log: WeightLog) -> dict[str, object]:
    return {
        "id": str(log.id),
        "userId": str(log.user_id),
        "date": log.date.isoformat(),
        "weight": log.weight,
        "notes": log.notes,
        "createdAt": log.created_at.isoformat() if log.created_at else None,
    }


def user_view(user: UserRecord) -> dict[str, object]:
    return {"id": str(user.id), "name": user.name, "email": user.email}


def profile_view(profile: UserProfile) -> dict[str, object]:
    return {
        "id": str(profile.id),
        "userId": str(profile.user_id),
        "startingWeight": profile.starting_weight,
        "currentWeight": profile.current_weight,
        "targetWeight": profile.target_weight,
        "height": profile.height,
        "dailySynAllowance": profile.daily_syn_allowance,
        "healthyExtraAAllowance": profile.healthy_extra_a_allowance,
        "healthyExtraBAllowance": profile.healthy_extra_b_allowance,
        "healthyExtraCAllowance": profile.healthy_extra_c_allowance,
    }


def correction_view(correction: SynCorrection) -> dict[str, object]:
    return {
        "name": correction.name,
        "before": correction.before,
        "after": correction.after,
        "portionSize": correction.portion_size,
        "portionUnit": correction.portion_unit,
    }


def migration_view(report: MigrationReport) -> dict[str, object]:
    message = (
        "Migration completed successfully"
        if report.fixed or report.skipped
        else "No products need fixing"
    )
    return {
        "success": True,
        "message": message,
        "fixed": report.fixed,
        "skipped": report.skipped,
        "products": [correction_view(item) for item in report.corrections],
    }
