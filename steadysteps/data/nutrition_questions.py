from steadysteps.enums.app_enum import NutritionChallengeEnum, TimeCommitmentEnum

PRIMARY_NUTRITION_QUESTIONS = {
    NutritionChallengeEnum.sugary_drinks: "Did you skip sugary drinks today (soda, juice, sweetened coffee)?",
    NutritionChallengeEnum.late_snacking: "Did you avoid eating within 2 hours of bedtime?",
    NutritionChallengeEnum.portions: "Did you stop eating when you felt satisfied rather than stuffed?",
    NutritionChallengeEnum.processed_food: "Did you eat at least one home-prepared meal today?",
    NutritionChallengeEnum.unsure: "Did you drink at least 6 glasses of water today?",
}

SECONDARY_NUTRITION_QUESTIONS = [
    "Did you eat at least one serving of vegetables today?",
    "Did you eat breakfast today?",
    "Did you choose fruit instead of a processed snack today?",
    "Did you eat slowly and mindfully for at least one meal today?",
]

ACTIVITY_GOAL_BY_COMMITMENT = {
    TimeCommitmentEnum.five_to_ten: 5,
    TimeCommitmentEnum.ten_to_fifteen: 10,
    TimeCommitmentEnum.fifteen_to_twenty: 15,
    TimeCommitmentEnum.twenty_to_thirty: 20,
    TimeCommitmentEnum.thirty_to_fortyfive: 30,
    TimeCommitmentEnum.fortyfive_to_sixty: 45,
}
