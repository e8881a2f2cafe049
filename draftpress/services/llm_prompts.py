"""LLM prompt templates for blog generation."""

BLOG_SYSTEM_PROMPT = "You are a professional blog writer."

TITLE_SYSTEM_PROMPT = "You are a professional headline writer."

STYLE_INSTRUCTIONS = {
    "professional": "Use formal language and include relevant facts.",
    "casual": "Use informal language and a friendly, conversational tone.",
    "technical": "Include technical details and use industry-specific terminology.",
}

# Characters of the body shown to the model when asking for a title
TITLE_CONTEXT_CHARS = 200


def get_blog_prompt(topic: str, style: str) -> str:
    """Generate prompt for the body of a blog post."""
    instructions = STYLE_INSTRUCTIONS.get(style, "")
    return f"Write a {style} blog post about {topic}. {instructions}".strip()


def get_title_prompt(content: str) -> str:
    """Generate prompt asking for a headline for an existing post body."""
    excerpt = content[:TITLE_CONTEXT_CHARS]
    return (
        f"Generate a concise, engaging title for this blog post: {excerpt}...\n\n"
        "Respond with the title only, no quotes, at most 100 characters."
    )
