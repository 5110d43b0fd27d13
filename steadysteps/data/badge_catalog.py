from steadysteps.enums.app_enum import BadgeCategoryEnum

CONSISTENCY = BadgeCategoryEnum.consistency
ACTIVITY = BadgeCategoryEnum.activity
NUTRITION = BadgeCategoryEnum.nutrition
MILESTONE = BadgeCategoryEnum.milestone
COMEBACK = BadgeCategoryEnum.comeback

BADGE_CATALOG = [
    # streak
    {"id": "first_checkin", "name": "First Check-In", "description": "Complete your first daily check-in", "category": CONSISTENCY, "icon": "🌱", "requirement": 1},
    {"id": "three_day_start", "name": "Three Day Start", "description": "Complete 3 consecutive check-ins", "category": CONSISTENCY, "icon": "🌿", "requirement": 3},
    {"id": "one_week", "name": "One Week Wonder", "description": "Complete 7 consecutive check-ins", "category": CONSISTENCY, "icon": "🌳", "requirement": 7},
    {"id": "ten_day", "name": "Ten Day Streak", "description": "Complete 10 consecutive check-ins", "category": CONSISTENCY, "icon": "⭐", "requirement": 10},
    {"id": "two_week", "name": "Two Week Triumph", "description": "Complete 14 consecutive check-ins", "category": CONSISTENCY, "icon": "🏅", "requirement": 14},
    {"id": "three_week", "name": "Three Week Warrior", "description": "Complete 21 consecutive check-ins", "category": CONSISTENCY, "icon": "💪", "requirement": 21},
    {"id": "monthly", "name": "Monthly Marvel", "description": "Complete 30 consecutive check-ins", "category": CONSISTENCY, "icon": "🏆", "requirement": 30},
    {"id": "six_week", "name": "Six Week Strong", "description": "Complete 42 consecutive check-ins", "category": CONSISTENCY, "icon": "🔥", "requirement": 42},
    {"id": "fifty_streak", "name": "Fifty Day Fighter", "description": "Complete 50 consecutive check-ins", "category": CONSISTENCY, "icon": "✨", "requirement": 50},
    {"id": "two_month", "name": "Two Month Master", "description": "Complete 60 consecutive check-ins", "category": CONSISTENCY, "icon": "💎", "requirement": 60},
    {"id": "seventy_five_club", "name": "Seventy Five Club", "description": "Complete 75 consecutive check-ins", "category": CONSISTENCY, "icon": "🎯", "requirement": 75},
    {"id": "ninety_champion", "name": "Ninety Day Champion", "description": "Complete 90 consecutive check-ins", "category": CONSISTENCY, "icon": "👑", "requirement": 90},
    {"id": "century", "name": "Century Club", "description": "Complete 100 consecutive check-ins", "category": CONSISTENCY, "icon": "💯", "requirement": 100},
    {"id": "half_year", "name": "Half Year Hero", "description": "Complete 180 consecutive check-ins", "category": CONSISTENCY, "icon": "🌟", "requirement": 180},
    {"id": "year_of_you", "name": "Year of You", "description": "Complete 365 consecutive check-ins", "category": CONSISTENCY, "icon": "🎊", "requirement": 365},

    # activity
    {"id": "first_activity", "name": "First Steps", "description": "Complete your first activity goal", "category": ACTIVITY, "icon": "👟", "requirement": 1},
    {"id": "five_activities", "name": "Getting Moving", "description": "Complete 5 activity goals", "category": ACTIVITY, "icon": "🚶", "requirement": 5},
    {"id": "ten_activities", "name": "Double Digits", "description": "Complete 10 activity goals", "category": ACTIVITY, "icon": "🏃", "requirement": 10},
    {"id": "twentyfive_activities", "name": "Quarter Century", "description": "Complete 25 activity goals", "category": ACTIVITY, "icon": "🎽", "requirement": 25},
    {"id": "fifty_activities", "name": "Fifty and Fabulous", "description": "Complete 50 activity goals", "category": ACTIVITY, "icon": "⭐", "requirement": 50},
    {"id": "seventyfive_activities", "name": "Seventy Five Strong", "description": "Complete 75 activity goals", "category": ACTIVITY, "icon": "💪", "requirement": 75},
    {"id": "hundred_activities", "name": "Century Mover", "description": "Complete 100 activity goals", "category": ACTIVITY, "icon": "🎯", "requirement": 100},
    {"id": "onefifty_activities", "name": "One Fifty Club", "description": "Complete 150 activity goals", "category": ACTIVITY, "icon": "🏅", "requirement": 150},
    {"id": "twohundred_activities", "name": "Two Hundred Wonder", "description": "Complete 200 activity goals", "category": ACTIVITY, "icon": "🌟", "requirement": 200},
    {"id": "threehundred_activities", "name": "Three Hundred Milestone", "description": "Complete 300 activity goals", "category": ACTIVITY, "icon": "🔥", "requirement": 300},
    {"id": "fourhundred_activities", "name": "Four Hundred Force", "description": "Complete 400 activity goals", "category": ACTIVITY, "icon": "💎", "requirement": 400},
    {"id": "fivehundred_activities", "name": "Five Hundred Star", "description": "Complete 500 activity goals", "category": ACTIVITY, "icon": "✨", "requirement": 500},
    {"id": "sevenfifty_activities", "name": "Seven Fifty Legend", "description": "Complete 750 activity goals", "category": ACTIVITY, "icon": "👑", "requirement": 750},
    {"id": "thousand_activities", "name": "Thousand Step Master", "description": "Complete 1000 activity goals", "category": ACTIVITY, "icon": "🏆", "requirement": 1000},
    {"id": "movement_life", "name": "Movement for Life", "description": "Complete 1500 activity goals", "category": ACTIVITY, "icon": "🎊", "requirement": 1500},

    # nutrition
    {"id": "mindful_start", "name": "Mindful Start", "description": "Complete your first nutrition check-in", "category": NUTRITION, "icon": "🥗", "requirement": 1},
    {"id": "nutrition_novice", "name": "Nutrition Novice", "description": "Complete all nutrition habits for 3 days", "category": NUTRITION, "icon": "🥦", "requirement": 3},
    {"id": "week_wellness", "name": "Week of Wellness", "description": "Complete all nutrition habits for 7 days", "category": NUTRITION, "icon": "🍎", "requirement": 7},
    {"id": "nutrition_navigator", "name": "Nutrition Navigator", "description": "Complete all nutrition habits for 14 days", "category": NUTRITION, "icon": "🥑", "requirement": 14},
    {"id": "three_week_nourisher", "name": "Three Week Nourisher", "description": "Complete all nutrition habits for 21 days", "category": NUTRITION, "icon": "🍇", "requirement": 21},
    {"id": "habit_hero", "name": "Habit Hero", "description": "Complete all nutrition habits for 30 days", "category": NUTRITION, "icon": "🌟", "requirement": 30},
    {"id": "six_week_sustainer", "name": "Six Week Sustainer", "description": "Complete all nutrition habits for 42 days", "category": NUTRITION, "icon": "🍊", "requirement": 42},
    {"id": "fifty_day_fuel", "name": "Fifty Day Fuel", "description": "Complete all nutrition habits for 50 days", "category": NUTRITION, "icon": "🔥", "requirement": 50},
    {"id": "sixty_day_dedication", "name": "Sixty Day Dedication", "description": "Complete all nutrition habits for 60 days", "category": NUTRITION, "icon": "💎", "requirement": 60},
    {"id": "seventyfive_nourished", "name": "Seventy Five Nourished", "description": "Complete all nutrition habits for 75 days", "category": NUTRITION, "icon": "🌿", "requirement": 75},
    {"id": "ninety_nutrition", "name": "Ninety Day Nutrition Pro", "description": "Complete all nutrition habits for 90 days", "category": NUTRITION, "icon": "👑", "requirement": 90},
    {"id": "hundred_health", "name": "Hundred Day Health", "description": "Complete all nutrition habits for 100 days", "category": NUTRITION, "icon": "💯", "requirement": 100},
    {"id": "half_year_healthy", "name": "Half Year Healthy", "description": "Complete all nutrition habits for 180 days", "category": NUTRITION, "icon": "🏆", "requirement": 180},
    {"id": "nutrition_master", "name": "Nutrition Master", "description": "Complete all nutrition habits for 270 days", "category": NUTRITION, "icon": "✨", "requirement": 270},
    {"id": "year_good_eating", "name": "Year of Good Eating", "description": "Complete all nutrition habits for 365 days", "category": NUTRITION, "icon": "🎊", "requirement": 365},

    # perfect day
    {"id": "perfect_start", "name": "Perfect Start", "description": "Complete your first perfect day", "category": MILESTONE, "icon": "💫", "requirement": 1},
    {"id": "perfect_three", "name": "Perfect Three", "description": "Complete 3 perfect days total", "category": MILESTONE, "icon": "⭐", "requirement": 3},
    {"id": "perfect_week", "name": "Perfect Week", "description": "Complete 7 perfect days total", "category": MILESTONE, "icon": "🌟", "requirement": 7},
    {"id": "perfect_ten", "name": "Perfect Ten", "description": "Complete 10 perfect days total", "category": MILESTONE, "icon": "✨", "requirement": 10},
    {"id": "twenty_perfect", "name": "Twenty Perfect", "description": "Complete 20 perfect days total", "category": MILESTONE, "icon": "💎", "requirement": 20},
    {"id": "thirty_perfect", "name": "Thirty Perfect", "description": "Complete 30 perfect days total", "category": MILESTONE, "icon": "🔥", "requirement": 30},
    {"id": "fifty_perfect", "name": "Fifty Perfect", "description": "Complete 50 perfect days total", "category": MILESTONE, "icon": "👑", "requirement": 50},
    {"id": "seventyfive_perfect", "name": "Seventy Five Perfect", "description": "Complete 75 perfect days total", "category": MILESTONE, "icon": "🏆", "requirement": 75},
    {"id": "hundred_perfect", "name": "Hundred Perfect", "description": "Complete 100 perfect days total", "category": MILESTONE, "icon": "💯", "requirement": 100},
    {"id": "perfect_master", "name": "Perfect Master", "description": "Complete 200 perfect days total", "category": MILESTONE, "icon": "🎊", "requirement": 200},

    # stage & level
    {"id": "stage_shifter", "name": "Stage Shifter", "description": "Advance from Beginner to Consistent stage", "category": MILESTONE, "icon": "📈", "requirement": None},
    {"id": "confident_climber", "name": "Confident Climber", "description": "Advance to Confident stage", "category": MILESTONE, "icon": "🎖️", "requirement": None},
    {"id": "level_five", "name": "Level Five", "description": "Reach Level 5 Flourishing", "category": MILESTONE, "icon": "🌸", "requirement": 5},
    {"id": "level_seven", "name": "Level Seven", "description": "Reach Level 7 Radiant", "category": MILESTONE, "icon": "☀️", "requirement": 7},
    {"id": "level_ten", "name": "Level Ten", "description": "Reach Level 10 SteadySteps Master", "category": MILESTONE, "icon": "👑", "requirement": 10},
    {"id": "goal_grower", "name": "Goal Grower", "description": "Experience your first goal progression increase", "category": MILESTONE, "icon": "🌻", "requirement": 1},
    {"id": "double_progression", "name": "Double Progression", "description": "Experience 2 goal progressions", "category": MILESTONE, "icon": "🌼", "requirement": 2},
    {"id": "triple_progression", "name": "Triple Progression", "description": "Experience 3 goal progressions", "category": MILESTONE, "icon": "🌺", "requirement": 3},
    {"id": "five_time_grower", "name": "Five Time Grower", "description": "Experience 5 goal progressions", "category": MILESTONE, "icon": "🌷", "requirement": 5},
    {"id": "maximum_achievement", "name": "Maximum Achievement", "description": "Reach maximum activity goal of 30 minutes", "category": MILESTONE, "icon": "🏆", "requirement": 30},

    # comeback & resilience
    {"id": "fresh_start", "name": "Fresh Start", "description": "Return after 3+ missed days", "category": COMEBACK, "icon": "🌅", "requirement": 3},
    {"id": "resilient", "name": "Resilient", "description": "Return after 7+ missed days", "category": COMEBACK, "icon": "💪", "requirement": 7},
    {"id": "never_give_up", "name": "Never Give Up", "description": "Return after 14+ missed days", "category": COMEBACK, "icon": "🦋", "requirement": 14},
    {"id": "bounce_back", "name": "Bounce Back", "description": "Return after 21+ missed days", "category": COMEBACK, "icon": "🚀", "requirement": 21},
    {"id": "monthly_return", "name": "Monthly Return", "description": "Return after 30+ missed days", "category": COMEBACK, "icon": "🌈", "requirement": 30},
    {"id": "second_chance", "name": "Second Chance", "description": "Start a new streak after losing a streak of 14+ days", "category": COMEBACK, "icon": "🔄", "requirement": 14},
    {"id": "third_wind", "name": "Third Wind", "description": "Start a new streak after losing a streak of 30+ days", "category": COMEBACK, "icon": "💨", "requirement": 30},
    {"id": "unstoppable_spirit", "name": "Unstoppable Spirit", "description": "Rebuild a 30 day streak after previously losing one", "category": COMEBACK, "icon": "🔥", "requirement": 30},

    # special achievement
    {"id": "early_bird", "name": "Early Bird", "description": "Complete check-in before 8 AM for 7 days", "category": MILESTONE, "icon": "🐦", "requirement": None},
    {"id": "night_owl_converted", "name": "Night Owl Converted", "description": "Complete check-in before 9 PM for 14 days", "category": MILESTONE, "icon": "🦉", "requirement": None},
    {"id": "weekend_warrior", "name": "Weekend Warrior", "description": "Complete check-ins on 8 consecutive weekend days", "category": MILESTONE, "icon": "🎉", "requirement": None},
    {"id": "monday_motivation", "name": "Monday Motivation", "description": "Complete check-in every Monday for 8 weeks", "category": MILESTONE, "icon": "📅", "requirement": None},
    {"id": "habit_explorer", "name": "Habit Explorer", "description": "Unlock and try 5 habits from Habit Library", "category": MILESTONE, "icon": "🔍", "requirement": None},
    {"id": "habit_collector", "name": "Habit Collector", "description": "Unlock and try 10 habits from Habit Library", "category": MILESTONE, "icon": "📚", "requirement": None},
    {"id": "coach_connection", "name": "Coach Connection", "description": "Have 10 conversations with the AI Coach", "category": MILESTONE, "icon": "💬", "requirement": 10},
    {"id": "coach_regular", "name": "Coach Regular", "description": "Have 50 conversations with the AI Coach", "category": MILESTONE, "icon": "🗣️", "requirement": 50},
    {"id": "buddy_builder", "name": "Buddy Builder", "description": "Add your first accountability buddy", "category": MILESTONE, "icon": "🤝", "requirement": None},
    {"id": "community_creator", "name": "Community Creator", "description": "Refer 3 friends who complete their first week", "category": MILESTONE, "icon": "🌍", "requirement": None},
    {"id": "referral_champion", "name": "Referral Champion", "description": "Earn your first free month from referrals", "category": MILESTONE, "icon": "🏅", "requirement": None},

    # mood tracking
    {"id": "mood_starter", "name": "Mood Starter", "description": "Complete your first mood check-in", "category": CONSISTENCY, "icon": "😊", "requirement": 1},
    {"id": "mood_week", "name": "Mood Week", "description": "Complete mood check-ins for 7 days", "category": CONSISTENCY, "icon": "📊", "requirement": 7},
    {"id": "mood_aware", "name": "Mood Aware", "description": "Complete mood check-ins for 14 days", "category": CONSISTENCY, "icon": "🧠", "requirement": 14},
    {"id": "mood_master", "name": "Mood Master", "description": "Complete mood check-ins for 30 days", "category": CONSISTENCY, "icon": "💭", "requirement": 30},
    {"id": "stress_reducer", "name": "Stress Reducer", "description": "Log improved mood after a stressed day 5 times", "category": CONSISTENCY, "icon": "🧘", "requirement": None},
    {"id": "calm_collector", "name": "Calm Collector", "description": "Log calm mood for 7 consecutive days", "category": CONSISTENCY, "icon": "☮️", "requirement": None},
    {"id": "emotional_intelligence", "name": "Emotional Intelligence", "description": "Complete mood check-ins for 90 days", "category": CONSISTENCY, "icon": "❤️", "requirement": 90},
]
