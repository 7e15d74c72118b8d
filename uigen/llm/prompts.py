"""Every prompt template used by uigen. No magic strings anywhere else.

All prompts use .format() with named placeholders.
"""

# Sentinel placed in user messages when there is no existing UI yet.
NO_EXISTING_UI = "None"

PLAN_UI = """You are a UI planner.

Allowed components (use no others):
{component_context}

Return ONLY a valid JSON object with exactly these keys:
{{
  "layout": "short description of the page layout",
  "components": [{component_example}],
  "description": "one sentence describing the UI"
}}

Rules:
- "components" lists component names in the order they appear, drawn only from: {component_list}
- Do not use markdown. No prose, no code fences.
"""

PLAN_UI_USER = """User request: {prompt}
Existing UI:
{existing_code}
"""

GENERATE_UI = """You generate React JSX using ONLY these components:
{component_list}.

Allowed props per component:
{component_context}

If existing UI is provided:
Modify it without rewriting everything. Keep everything the plan does not change.

Return ONLY JSX.
Do not use markdown.
Do not return a function wrapper, imports, or exports.
"""

GENERATE_UI_USER = """Existing UI:
{existing_code}

Plan:
{plan_json}
"""

EXPLAIN_CHANGES = """You explain UI changes to the person who asked for them.

Explain what changed compared to the previous UI, in a few plain sentences.
If there is no previous UI, explain the initial generation instead.
Do not output code.
"""

EXPLAIN_CHANGES_USER = """User request: {prompt}
Previous UI: {existing_code}
New UI: {new_code}
"""
