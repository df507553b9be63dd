# services/resources.py

from models.helpline import Helpline

# India-based, available 24/7
HELPLINES = [
    Helpline("KIRAN Mental Health Helpline", "1800-599-0019", "24/7 Mental Health Support"),
    Helpline("iCall Helpline", "9152987821", "Counseling Support"),
    Helpline("NIMHANS Helpline", "080-46110007", "Mental Health Emergency"),
    Helpline("Sneha Foundation", "044-24640050", "Emotional Support"),
]

CRISIS_HELPLINES = HELPLINES[:2]

STUDY_TIPS = [
    "Take regular breaks using the Pomodoro technique (25 min study, 5 min break)",
    "Create a dedicated study space free from distractions",
    "Set realistic daily goals and celebrate small achievements",
    "Practice mindfulness before exams to reduce anxiety",
    "Connect with friends and family for emotional support during stressful periods",
]

# 4-7-8 technique
BREATHING_STEPS = [
    "Inhale through your nose for 4 counts",
    "Hold your breath for 7 counts",
    "Exhale through your mouth for 8 counts",
    "Repeat 3-4 times",
]

DISCLAIMER = (
    "This is a support tool, not a substitute for professional medical advice. "
    "If you're experiencing a mental health crisis, please contact emergency "
    "services or the helplines above immediately."
)
