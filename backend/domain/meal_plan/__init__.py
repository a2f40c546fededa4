"""Meal Plan domain - calendar views and statistics over recipe assignments.

Layout:
- core/entities: MealPlan aggregate, MealPlanRecipe assignments, tags
- core/value_objects: ids, meal types, date ranges, view parameters
- core/views: derived projections and statistics records
- services: pure validation, date resolution, projection and aggregation
"""
