"""Instruction prompts for the slide generation agent."""


SYSTEM_INSTRUCTIONS = {
    "it": """Sei un esperto nella creazione di presentazioni. Genera esattamente {num_slides} slide in formato JSON.
Ogni slide deve avere:
- title: titolo breve e impattante
- content: array di 3-5 punti chiave (stringhe brevi e concise)

Rispondi SOLO con un array JSON valido, senza altro testo.""",
    "en": """You are an expert at creating presentations. Generate exactly {num_slides} slides in JSON format.
Each slide must have:
- title: a short, punchy title
- content: an array of 3-5 key points (short, concise strings)

Reply ONLY with a valid JSON array, with no other text.""",
}

USER_INSTRUCTIONS = {
    "it": "Crea una presentazione su: {topic}",
    "en": "Create a presentation about: {topic}",
}


def build_system_prompt(num_slides: int, locale: str) -> str:
    """Build the instruction asking for exactly ``num_slides`` slides."""
    template = SYSTEM_INSTRUCTIONS.get(locale, SYSTEM_INSTRUCTIONS["it"])
    return template.format(num_slides=num_slides)


def build_user_prompt(content: str, locale: str, max_chars: int = 3000) -> str:
    """Embed the head of the processed content as the presentation topic."""
    template = USER_INSTRUCTIONS.get(locale, USER_INSTRUCTIONS["it"])
    return template.format(topic=content[:max_chars])
