"""Prompt texts sent to Gemini."""

ANALYSIS_PROMPT = (
    "Analyze this video and provide:\n"
    "1. A brief summary of what the video shows (2-3 sentences)\n"
    "2. Main topics or subjects covered (bullet points)\n"
    "3. Key moments with timestamps in MM:SS format (chronological order)\n"
    "4. Any technical concepts or important details mentioned\n"
    "5. Notable visual elements or scenes described\n\n"
    "Format the response in a clear, structured way with headings.\n"
    "Be specific and detailed but concise."
)

DIRECT_ANSWER_SUFFIX = "Based on the video content, provide a clear and direct answer."

GUIDED_CHAT_TEMPLATE = (
    "Based on the video content, answer this question: {question}\n\n"
    "Consider:\n"
    "- If a timestamp (MM:SS) is mentioned, focus on that specific moment\n"
    "- For technical questions, provide clear, detailed explanations\n"
    "- For visual questions, describe what is shown in detail\n"
    "- For summaries, focus on key points and maintain context\n\n"
    "Provide a clear, direct answer that specifically addresses the question."
)


def direct_chat_prompt(question: str) -> str:
    """Question followed by an instruction to answer from the video."""
    return f"{question}\n\n{DIRECT_ANSWER_SUFFIX}"


def guided_chat_prompt(question: str) -> str:
    """Question wrapped with guidance for timestamps, technical and visual questions."""
    return GUIDED_CHAT_TEMPLATE.format(question=question)
