"""
Prompt templates for each AI feature.

Each builder returns a chat "messages" list:
    - system message: the assistant's role and strict output rules
    - user message: the note content to work on
"""
from typing import Dict, List, Optional

from ..domain.value_objects import DEFAULT_TITLE

Message = Dict[str, str]

# How much existing page text the generate prompt carries as context
GENERATE_CONTEXT_CHARS = 1000


def get_summarize_prompt(title: str, content: str) -> List[Message]:
    return [
        {
            "role": "system",
            "content": (
                "You are a concise note summarizer. Your job is to read a note and produce a clear, "
                "informative summary in 2-3 sentences. Focus on the key points and main ideas. "
                "Do NOT use markdown formatting. Just return plain text."
            ),
        },
        {
            "role": "user",
            "content": f"Note Title: {title or DEFAULT_TITLE}\n\nNote Content:\n{content}",
        },
    ]


def get_improve_prompt(content: str, selection: Optional[str] = None) -> List[Message]:
    """Only the selection is sent when there is one."""
    text_to_improve = selection or content

    return [
        {
            "role": "system",
            "content": (
                "You are a professional writing assistant. Your job is to improve the given text by:\n"
                "- Fixing grammar and spelling errors\n"
                "- Improving clarity and readability\n"
                "- Better sentence structure and flow\n"
                "- Keeping the original meaning and tone intact\n\n"
                "IMPORTANT RULES:\n"
                "- Return ONLY the improved text, nothing else\n"
                "- Do NOT add explanations or comments\n"
                "- Do NOT wrap in quotes or markdown\n"
                "- Keep the same general length (don't make it significantly longer or shorter)"
            ),
        },
        {
            "role": "user",
            "content": f"Please improve this text:\n\n{text_to_improve}",
        },
    ]


def get_tags_prompt(title: str, content: str) -> List[Message]:
    return [
        {
            "role": "system",
            "content": (
                "You are a tag generator for notes. Your job is to read a note and generate "
                "3 to 5 short, relevant tags that describe the note's topic and content.\n\n"
                "IMPORTANT RULES:\n"
                "- Return ONLY a valid JSON array of strings, nothing else\n"
                "- Each tag should be 1-2 words, lowercase\n"
                "- Tags should be descriptive and useful for categorization\n"
                '- Example output: ["javascript", "web development", "react hooks"]\n'
                "- Do NOT include explanations or any other text"
            ),
        },
        {
            "role": "user",
            "content": f"Note Title: {title or DEFAULT_TITLE}\n\nNote Content:\n{content}",
        },
    ]


def get_generate_prompt(
    user_prompt: str,
    title: Optional[str] = None,
    existing_content: Optional[str] = None
) -> List[Message]:
    system_content = (
        "You are a creative and helpful writing assistant inside a note-taking app. "
        "Your job is to generate high-quality text based on the user's request.\n"
        "Keep the following in mind:\n"
        "- Be helpful and provide valuable, well-structured information\n"
        "- Use clear, professional yet conversational language\n"
        "- If provided, use the note title and existing content to match the current style/context\n"
        '- Do NOT add introductory or concluding remarks like "Here is the content you requested"\n'
        "- Just return the generated text content directly."
    )

    if title or existing_content:
        system_content += "\n\nContext for this note:\n"
        if title:
            system_content += f"- Title: {title}\n"
        if existing_content:
            excerpt = existing_content[:GENERATE_CONTEXT_CHARS]
            suffix = "... (truncated)" if len(existing_content) > GENERATE_CONTEXT_CHARS else ""
            system_content += f"- Existing Content: {excerpt}{suffix}\n"

    return [
        {"role": "system", "content": system_content},
        {"role": "user", "content": f"User Request: {user_prompt}"},
    ]
