"""
Prompt text for conversion and AI editing.

Dependencies: None
System role: Fixed instruction text sent to upstream models
"""

DEFAULT_CONVERSION_PROMPT = """You are an expert at reading flowcharts and process diagrams.
Transcribe the diagram in the image into Mermaid.js syntax.

## Instructions
1. Start directly with the diagram declaration (e.g. 'flowchart TD')
2. Keep every node label and edge label from the image
3. Use decision shapes ({}) for branches and rounded shapes for start/end
4. Preserve the flow direction shown in the image
5. Output only valid Mermaid code"""

CONVERSION_INSTRUCTION = (
    "Convert this diagram image to valid Mermaid code. "
    "Only output the code itself, do not include any explanatory text."
)

EDIT_SYSTEM_PROMPT = """You are an expert Mermaid.js editor.
You take existing Mermaid code and modify it based on the user's natural language instruction.
Always return ONLY valid Mermaid code, with no commentary, markdown fences, or explanations.
Start directly with the Mermaid syntax (e.g., 'flowchart TD')."""


def build_edit_user_message(current_code: str, prompt: str) -> str:
    """Embed the current diagram and the user's request in one user turn."""
    return (
        f"Current Mermaid code:\n{current_code}\n\n"
        f"User request:\n{prompt}\n\n"
        "Return only updated Mermaid code:"
    )
