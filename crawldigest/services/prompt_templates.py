"""Task prompts for per-chunk generation and the final combining call."""

SUMMARIZE = "summarize"
EXTRACT = "extract"
ANALYZE = "analyze"
QUESTIONS = "questions"

_TEMPLATES = {
    SUMMARIZE: (
        "Please provide a comprehensive summary of the following web content. "
        "Focus on the main points, key information, and overall themes:\n\n"
        "{content}\n\n"
        "Provide a well-structured summary with key points, important details, and main conclusions."
    ),
    EXTRACT: (
        "Please extract all factual information from the following web content:\n\n"
        "{content}\n\n"
        "Format the information as a list of verified facts found in the content."
    ),
    ANALYZE: (
        "Please analyze the following web content:\n\n"
        "{content}\n\n"
        "Provide:\n"
        "1. Main topic overview\n"
        "2. Key arguments or claims made\n"
        "3. Evidence presented\n"
        "4. Logical fallacies or biases (if any)\n"
        "5. Quality assessment of the information\n"
        "6. Connections between concepts\n"
        "7. Areas where information might be missing"
    ),
    QUESTIONS: (
        "Based on the following web content:\n\n"
        "{content}\n\n"
        "Generate 10 important questions that someone might have after reading this content, "
        "along with detailed answers based solely on the information provided."
    ),
}

_GENERIC_TEMPLATE = "Please {task} the following web content:\n\n{content}"

_COMBINE_TEMPLATE = (
    "You've analyzed multiple chunks of web content and provided separate analyses. "
    "Please combine and synthesize these separate analyses into a single coherent response:\n\n"
    "{partials}\n\n"
    "Provide a unified, well-structured response that combines all the information without repetition."
)


def build_task_prompt(task: str, content: str) -> str:
    """Prompt for one chunk; unknown tasks use the task name as the instruction verb."""
    template = _TEMPLATES.get(task.strip().lower())
    if template is None:
        return _GENERIC_TEMPLATE.format(task=task.strip(), content=content)
    return template.format(content=content)


def build_combine_prompt(partials: list[str]) -> str:
    return _COMBINE_TEMPLATE.format(partials="\n\n".join(partials))
