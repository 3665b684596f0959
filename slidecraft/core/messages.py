"""User-visible strings for every supported locale."""

DEFAULT_LOCALE = "it"

MESSAGES: dict[str, dict[str, str]] = {
    "it": {
        # Demo deck
        "demo.default_keyword": "Presentazione",
        "demo.intro_title": "{keyword} - Introduzione",
        "demo.intro_overview": "Panoramica dell'argomento",
        "demo.intro_objectives": "Obiettivi principali",
        "demo.intro_key_points": "Punti chiave da esplorare",
        "demo.section_title": "Sezione {index}: {word}",
        "demo.section_default_word": "Dettagli",
        "demo.section_aspect": "Aspetto importante numero {index}",
        "demo.section_analysis": "Analisi approfondita",
        "demo.section_examples": "Esempi pratici",
        "demo.section_considerations": "Considerazioni chiave",
        "demo.conclusion_title": "Conclusioni",
        "demo.conclusion_summary": "Riepilogo dei punti principali",
        "demo.conclusion_next_steps": "Prossimi passi consigliati",
        "demo.conclusion_questions": "Domande e discussione",
        # Generation
        "generation.demo_description": "Presentazione generata (demo mode)",
        "generation.document_placeholder": "Crea una presentazione generica basata sul documento caricato",
        # Errors
        "error.unauthorized": "Non autorizzato",
        "error.missing_content": "Fornisci un prompt o carica un documento",
        "error.too_many_slides": "Puoi richiedere al massimo {max_slides} slide",
        "error.presentation_not_found": "Presentazione non trovata",
        "error.generation_failed": "Errore durante la generazione",
        "error.list_failed": "Errore nel recupero delle presentazioni",
        "error.fetch_failed": "Errore nel recupero della presentazione",
        "error.delete_failed": "Errore durante l'eliminazione",
        "error.internal": "Si è verificato un errore imprevisto",
        # Viewer
        "viewer.position": "Slide {current} di {total}",
    },
    "en": {
        "demo.default_keyword": "Presentation",
        "demo.intro_title": "{keyword} - Introduction",
        "demo.intro_overview": "Topic overview",
        "demo.intro_objectives": "Main objectives",
        "demo.intro_key_points": "Key points to explore",
        "demo.section_title": "Section {index}: {word}",
        "demo.section_default_word": "Details",
        "demo.section_aspect": "Important aspect number {index}",
        "demo.section_analysis": "In-depth analysis",
        "demo.section_examples": "Practical examples",
        "demo.section_considerations": "Key considerations",
        "demo.conclusion_title": "Conclusions",
        "demo.conclusion_summary": "Summary of the main points",
        "demo.conclusion_next_steps": "Recommended next steps",
        "demo.conclusion_questions": "Questions and discussion",
        "generation.demo_description": "Generated presentation (demo mode)",
        "generation.document_placeholder": "Create a generic presentation based on the uploaded document",
        "error.unauthorized": "Unauthorized",
        "error.missing_content": "Provide a prompt or upload a document",
        "error.too_many_slides": "You can request at most {max_slides} slides",
        "error.presentation_not_found": "Presentation not found",
        "error.generation_failed": "Error during generation",
        "error.list_failed": "Error while fetching presentations",
        "error.fetch_failed": "Error while fetching the presentation",
        "error.delete_failed": "Error while deleting",
        "error.internal": "An unexpected error occurred",
        "viewer.position": "Slide {current} of {total}",
    },
}

SUPPORTED_LOCALES = frozenset(MESSAGES)


def translate(key: str, locale: str = DEFAULT_LOCALE, **params) -> str:
    """
    Look up a message and format it with the given parameters.

    Unknown locales use the default catalogue. A missing key raises KeyError,
    since every key is expected in every catalogue.
    """
    catalogue = MESSAGES.get(locale, MESSAGES[DEFAULT_LOCALE])
    template = catalogue[key]
    return template.format(**params) if params else template
