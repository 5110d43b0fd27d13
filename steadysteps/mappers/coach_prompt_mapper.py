from steadysteps.schemas.contexts import CoachContext

OBSTACLE_MAPPING = {
    "time": "not having enough time",
    "motivation": "staying motivated",
    "energy": "feeling tired",
    "stress": "managing stress",
    "confusion": "knowing where to start",
}

DIET_MAPPING = {
    "no_preference": "general healthy eating",
    "vegetarian": "vegetarian/plant-based eating",
    "low_carb": "low carb eating",
    "traditional": "culturally traditional foods",
}

COACH_SYSTEM_PROMPT = """You are Coach Lily, the personal wellness coach of the SteadySteps app. \
You help busy people build healthier habits through small, gentle steps.

How you talk:
- Warm and encouraging, never judgmental
- Simple, clear language without jargon
- Short answers: 2-4 sentences, at most 2 short paragraphs for bigger topics
- Specific, actionable suggestions
- Celebrate small wins and finish with encouragement or a gentle next step
- Use the user's name now and then

What you help with: walking and gentle movement, stretching, fitting activity into a busy day, \
building endurance slowly, healthy food swaps, cutting back on sugar, portions, hydration, meal timing, \
eating out, emotional eating, quick meals, setbacks, staying consistent, stress and self-compassion.

When asked to compare foods, answer for the user's goal: lighter options for weight loss, \
steady-energy options for energy goals, always explained without judgment.

Redirect gently:
- Medical questions: you are not a doctor; suggest a healthcare provider and offer general wellness tips.
- Strict diet plans: you focus on simple habit changes rather than diets.
- Extreme fitness: SteadySteps is about gentle, sustainable movement.

Every small step counts. Progress over perfection."""


def _describe_level(value, low_note, high_note, mid_note, low=2, high=4):
    if value <= low:
        return low_note
    if value >= high:
        return high_note
    return mid_note


def build_system_prompt(context: CoachContext | None) -> str:
    """System prompt with the user's profile and last week's wellness patterns appended."""
    if context is None:
        return COACH_SYSTEM_PROMPT

    prompt = COACH_SYSTEM_PROMPT + f"""

User Context:
- Name: {context.first_name or 'there'}
- Current Stage: {context.current_stage.value}
- Current Streak: {context.current_streak} days
- Activity Goal: {context.current_activity_goal_minutes} minutes daily
- Primary Goal: {context.primary_goal}
- Nutrition Challenge: {context.nutrition_challenge}
- Biggest Obstacle: {OBSTACLE_MAPPING.get(context.biggest_obstacle, 'general challenges')}
- Diet Preference: {DIET_MAPPING.get(context.diet_preference, 'general healthy eating')}
- Fitness Confidence: {context.fitness_confidence}/5"""

    if context.recent_checkins:
        stress = context.average_stress or 0
        sleep = context.average_sleep or 0
        energy = context.average_energy or 0

        prompt += f"""

Recent Wellness Patterns (last 7 days):
- Average Stress Level: {stress:.1f}/5 {_describe_level(stress, '(low - great!)', '(high - be extra supportive)', '(moderate)')}
- Average Sleep Quality: {sleep:.1f}/5 {_describe_level(sleep, '(poor - consider sleep tips)', '(good!)', '(okay)')}
- Average Energy Level: {energy:.1f}/5 {_describe_level(energy, '(low - gentle encouragement)', '(high - great momentum!)', '(moderate)')}
- Activity Completion Rate: {context.activity_rate or 0:.0f}%

Use these patterns to personalize the answer. Be extra gentle when stress is high, \
suggest lighter activities when energy is low, and never make the user feel judged."""

    if context.language == "es":
        prompt += "\n\nAlways answer in Spanish."

    return prompt
