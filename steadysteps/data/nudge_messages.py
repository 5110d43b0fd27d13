from steadysteps.enums.app_enum import NudgeTypeEnum

NUDGE_MESSAGES = {
    "en": {
        NudgeTypeEnum.missed_days: [
            "It's okay. Today counts.",
            "Every day is a fresh start. Welcome back.",
            "Life happens. Let's focus on today.",
            "No pressure. Just one small step today.",
        ],
        NudgeTypeEnum.high_stress: [
            "Take it easy today. Small steps are enough.",
            "Be extra gentle with yourself today.",
            "High stress? Rest counts as progress too.",
            "You don't have to be perfect. Just present.",
        ],
        NudgeTypeEnum.consistency: [
            "You've been showing up. That's what matters.",
            "Your consistency is building real habits.",
            "Small steps, steady progress. You're doing it.",
            "Every check-in is a win. Keep going.",
        ],
        NudgeTypeEnum.low_sleep: [
            "Rest is part of the journey.",
            "Tired? Listen to your body today.",
            "Energy low? That's okay. Do what you can.",
        ],
        NudgeTypeEnum.encouragement: [
            "You're not behind. You're exactly where you need to be.",
            "Progress isn't always visible. Trust the process.",
            "Every small step counts. You're doing great.",
        ],
    },
    "es": {
        NudgeTypeEnum.missed_days: [
            "Está bien. Hoy cuenta.",
            "Cada día es un nuevo comienzo. Bienvenida de vuelta.",
            "La vida pasa. Enfoquémonos en hoy.",
            "Sin presión. Solo un pequeño paso hoy.",
        ],
        NudgeTypeEnum.high_stress: [
            "Tómatelo con calma hoy. Pequeños pasos son suficientes.",
            "Sé extra gentil contigo hoy.",
            "¿Mucho estrés? El descanso también cuenta como progreso.",
            "No tienes que ser perfecta. Solo estar presente.",
        ],
        NudgeTypeEnum.consistency: [
            "Has estado presente. Eso es lo que importa.",
            "Tu consistencia está construyendo hábitos reales.",
            "Pequeños pasos, progreso constante. Lo estás logrando.",
            "Cada registro es una victoria. Sigue adelante.",
        ],
        NudgeTypeEnum.low_sleep: [
            "El descanso es parte del viaje.",
            "¿Cansada? Escucha a tu cuerpo hoy.",
            "¿Energía baja? Está bien. Haz lo que puedas.",
        ],
        NudgeTypeEnum.encouragement: [
            "No estás atrasada. Estás exactamente donde necesitas estar.",
            "El progreso no siempre es visible. Confía en el proceso.",
            "Cada pequeño paso cuenta. Lo estás haciendo genial.",
        ],
    },
}

DEFAULT_LANGUAGE = "en"
