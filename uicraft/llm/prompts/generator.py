# uicraft/llm/prompts/generator.py
"""
Generator prompt - convert a layout plan into a single React 'App' component.

The output contract mirrors what the sanitizer and the preview expect:
one `const App` definition, no redefinition of whitelisted components,
and a trailing `render(<App />);`.
"""
import json

from uicraft.core.types import Mode, Plan
from uicraft.core.whitelist import ComponentWhitelist


APP_COMPONENT = "App"
APP_BINDING = f"const {APP_COMPONENT}"
RENDER_CALL = f"render(<{APP_COMPONENT} />);"

# Color requests are expressed through the `variant` prop only.
VARIANTS = {
    "primary": "blue",
    "secondary": "gray",
    "danger": "red",
    "success": "green",
}
DEFAULT_VARIANT = "primary"


GENERATOR_PROMPT = """
Task: Convert this JSON plan into a React '{app}' component string: {plan}

CONTEXT:
{context}

STRICT RULES:
1. SURGICAL EDIT: Modify the existing '{app}' component. Do NOT delete existing logic unless requested.
2. NO REDEFINITIONS: Do NOT define {components}. They are global.
3. Define ONLY: {binding} = () => {{ ... }};
4. LAST LINE: {render}
5. OUTPUT: Raw code only. No markdown. No explanations.
6. For colors, use the 'variant' prop on components.
7. Button variants: {variants}. Default is "{default_variant}".
8. If a user asks for "red", use variant="danger". If a user asks for "green", use variant="success".
"""


def _describe_variants() -> str:
    return ", ".join(f'"{name}" ({color})' for name, color in VARIANTS.items())


def build_generator_prompt(
    plan: Plan,
    current_code: str,
    mode: Mode,
    whitelist: ComponentWhitelist,
) -> str:
    """Build the code generation prompt for an already-produced plan."""
    if mode is Mode.EDIT:
        context = f"BASE CODE TO MODIFY: \n{current_code}"
    else:
        context = "This is a new generation."

    components = ", ".join(f"'{name}'" for name in whitelist.component_names())

    return GENERATOR_PROMPT.format(
        app=APP_COMPONENT,
        plan=json.dumps(plan),
        context=context,
        components=components or "any library component",
        binding=APP_BINDING,
        render=RENDER_CALL,
        variants=_describe_variants(),
        default_variant=DEFAULT_VARIANT,
    )
