"""Coaching domain configuration - voices, delivery settings, message banks."""

COACHING_STYLES = ("calm", "energetic", "wise")

# ElevenLabs voice per style
VOICE_IDS = {
    "calm": "pNInz6obpgDQGcFmaJgB",         # Nicole - warm, natural
    "energetic": "nPczCjzI2devNBz1zQrb",    # Brian - professional narrator
    "wise": "ThT5KcBeYPX3keUQqHPh",         # Arnold - deep, measured
    "inspiration": "EXAVITQu4vr4xnSDxMaL",  # Bella - soft, conversational
}

VOICE_SETTINGS = {
    "calm": {
        "stability": 0.71,
        "similarity_boost": 0.85,
        "style": 0.35,
        "use_speaker_boost": True,
    },
    "energetic": {
        "stability": 0.6,
        "similarity_boost": 0.8,
        "style": 0.7,
        "use_speaker_boost": True,
    },
    "wise": {
        "stability": 0.65,
        "similarity_boost": 0.8,
        "style": 0.45,
        "use_speaker_boost": True,
    },
    "inspiration": {
        "stability": 0.75,
        "similarity_boost": 0.9,
        "style": 0.25,
        "use_speaker_boost": True,
    },
}

# Mood score boundaries (0-100)
LOW_MOOD_BELOW = 33
MODERATE_MOOD_BELOW = 66

COACHING_MESSAGES = {
    "calm": {
        "greeting": "Take a deep breath with me",
        "low": [
            "It's okay to feel this way. Let's start with just one small, gentle step forward. Remember, healing happens in quiet moments of self-compassion.",
            "Your feelings are valid, and this moment will pass. Focus on your breath - inhale peace, exhale tension. You're stronger than you know.",
            "Sometimes the most courageous thing is to simply be present with yourself. Take it slow today, one mindful moment at a time.",
        ],
        "moderate": [
            "You're finding your balance today. Trust in your ability to navigate whatever comes your way with grace and wisdom.",
            "This steady energy is perfect for mindful progress. Set an intention for today and let it guide you gently forward.",
            "You're in a beautiful space of calm awareness. Use this clarity to focus on what truly matters to you right now.",
        ],
        "high": [
            "Your positive energy is radiant today. Channel this beautiful momentum into meaningful actions that align with your values.",
            "What a wonderful day to practice gratitude and share your light with others. Your calm confidence is inspiring.",
            "This is the perfect time for creative thinking and peaceful productivity. Trust your intuition to guide you.",
        ],
    },
    "energetic": {
        "greeting": "LET'S GO! Time to CRUSH today!",
        "low": [
            "Hey champion! Even the strongest warriors need rest days. But you know what? You're STILL here, you're STILL fighting, and that makes you INCREDIBLE!",
            "Listen up, superstar! Low energy doesn't mean low potential. You've got FIRE inside you - let's start with ONE small win and build from there!",
            "BOOM! You showed up today, and that's already a VICTORY! Every small step forward is you CRUSHING your comfort zone. Let's DO this!",
        ],
        "moderate": [
            "YES! You're in the PERFECT zone to make things happen! This steady energy is your secret weapon - use it to DOMINATE your goals!",
            "AMAZING! You're locked and loaded for SUCCESS today! Channel this focused energy into ACTION and watch yourself SOAR!",
            "FANTASTIC! You're riding the perfect wave of motivation. Time to turn that energy into RESULTS! What's your first BIG move?",
        ],
        "high": [
            "UNSTOPPABLE! You're absolutely ON FIRE today! This is YOUR moment to SHINE and show the world what you're made of!",
            "INCREDIBLE! Your energy is ELECTRIC! Use this POWER to tackle your biggest challenges and SMASH through every barrier!",
            "PHENOMENAL! You're operating at PEAK performance! Nothing can stop you when you're in this zone - go CONQUER your dreams!",
        ],
    },
    "wise": {
        "greeting": "Wisdom comes through experience and reflection",
        "low": [
            "In the depths of winter, I finally learned that within me there lay an invincible summer. Your current struggle is forging your future strength.",
            "The oak tree that withstands the storm grows stronger roots. What feels like setback today is tomorrow's foundation for growth.",
            "Even the mightiest river flows around obstacles, not through them. What can you learn from water's patient persistence?",
        ],
        "moderate": [
            "Balance is not something you find, but something you create. You're walking the middle path with wisdom and grace today.",
            "The master gardener knows that steady, consistent care yields the most beautiful gardens. Your patience will bear fruit.",
            "True strength lies not in the absence of struggle, but in the quiet confidence to face whatever comes. You embody this wisdom.",
        ],
        "high": [
            "When the student is ready, the teacher appears. Your elevated spirit today is both student and teacher - what will you learn and share?",
            "The mountain peak offers the clearest view, but remember - the journey up taught you everything you needed to know.",
            "Your energy today is like the sun at noon - powerful and illuminating. Use this clarity to see the path ahead with wisdom.",
        ],
    },
}

DAILY_MESSAGES = {
    "low": [
        "Remember, every small step forward is progress. You don't have to climb the whole mountain today - just take the next step.",
        "Your current struggles are building your future strength. Be gentle with yourself as you navigate this challenging time.",
        "It's okay to have difficult days. What matters is that you're here, you're trying, and tomorrow is a fresh start.",
        "Sometimes the most productive thing you can do is rest. Honor where you are right now and trust in your resilience.",
    ],
    "moderate": [
        "You're in a perfect position to make steady progress today. Trust in your ability to handle whatever comes your way.",
        "This balanced energy is your sweet spot for meaningful work. Focus on what truly matters to you right now.",
        "You have everything you need within you to succeed. Take confident steps toward your goals today.",
        "Your consistent effort is building something beautiful. Keep moving forward with purpose and intention.",
    ],
    "high": [
        "Your positive energy is contagious! Use this momentum to tackle your biggest goals and inspire others around you.",
        "This is your time to shine! Channel this incredible energy into actions that align with your deepest values.",
        "You're operating at your peak today. What amazing things will you create with this powerful, focused energy?",
        "Your enthusiasm is your superpower today. Let it guide you toward meaningful achievements and joyful moments.",
    ],
}

INSPIRATIONAL_QUOTES = [
    ("The only way to do great work is to love what you do. If you haven't found it yet, keep looking. Don't settle.", "Steve Jobs"),
    ("Success is not final, failure is not fatal: it is the courage to continue that counts.", "Winston Churchill"),
    ("The future belongs to those who believe in the beauty of their dreams.", "Eleanor Roosevelt"),
    ("It is during our darkest moments that we must focus to see the light.", "Aristotle"),
    ("The only impossible journey is the one you never begin.", "Tony Robbins"),
    ("In the middle of difficulty lies opportunity.", "Albert Einstein"),
    ("Believe you can and you're halfway there.", "Theodore Roosevelt"),
    ("The way to get started is to quit talking and begin doing.", "Walt Disney"),
]

# Played when no daily message has been generated yet
DEFAULT_INSPIRATION = {
    "message": (
        "Today is a new opportunity to grow, learn, and become the best version of yourself. "
        "Embrace the challenges and celebrate the victories, no matter how small."
    ),
    "quote": "The only way to do great work is to love what you do.",
    "author": "Steve Jobs",
}
