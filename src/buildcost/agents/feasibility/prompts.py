"""Prompt for the feasibility pre-check.

Placeholders are filled from ``ProjectInputs``; literal braces are doubled.
"""

PROMPT_TEMPLATE = """\
Act as a construction project manager and cost estimator for {location}.

Project Inputs:
- Type: {project_type}
- Size: {size_sq_ft} sq ft
- Budget: {budget_limit}
- Quality: {quality}
- Timeline: {timeline_months} months
- Manpower: {manpower} workers

TASK:
1. **Financial Feasibility**:
   - Calculate Budget Per Sq Ft = {budget_limit} / {size_sq_ft}.
   - Estimate the AVERAGE Market Rate per sq ft for {quality} {project_type} \
construction in {location} (Total Project Cost including materials, labor, finishes).
   - Compare:
       - If Budget Per Sq Ft < Market Rate * 0.8 => 'Insufficient'
       - If Budget Per Sq Ft > Market Rate * 3.0 => 'Excessive'
       - Otherwise => 'Realistic'

2. **Physical/Labor Feasibility (CRITICAL - Can manpower complete work in timeline?)**:
   - Determine the standard working days per month in {location} (typically 25-26 working days/month).
   - Estimate the **Total Man-Days Required** to complete a {size_sq_ft} sq ft \
{project_type} project of {quality} quality.
      - Use realistic productivity rates based on project type:
        * Residential: 15-20 sq ft/day per worker
        * Commercial: 10-15 sq ft/day per worker
        * Industrial: 8-12 sq ft/day per worker
        * Renovation: 12-18 sq ft/day per worker
      - Adjust for quality level: Economy +20% productivity, Premium -15% productivity.
   - Calculate **Available Man-Days** = {manpower} workers x {timeline_months} months x 25 working days/month.
   - **TIMELINE FEASIBILITY CHECK**: Compare Required vs Available Man-Days.
   - If Available < Required, calculate how many additional workers needed OR how many extra months required.
   - This determines if the project can realistically be completed with given manpower and timeline.

OUTPUT: Return ONLY a valid JSON object with this structure:
{{
  "isValid": boolean,
  "budgetVerdict": "Realistic" | "Insufficient" | "Excessive",
  "issues": ["string"],
  "suggestions": ["string"]
}}

CRITICAL REQUIREMENTS FOR MANPOWER/TIMELINE ANALYSIS:
- If manpower/timeline is insufficient, you MUST add a HIGH-PRIORITY issue as the FIRST item: \
"TIMELINE FEASIBILITY: With current manpower, this project requires X months minimum \
OR you need Y additional workers for the planned timeline."
- Calculate and include specific numbers: Required Man-Days, Available Man-Days, and exact recommendations.
- Make manpower/timeline issues the FIRST item in the issues array when they exist.
- Provide clear, actionable suggestions: "Increase manpower to X workers" OR \
"Extend timeline to Y months" OR "Both options available".
- If timeline is feasible, explicitly state: "Manpower sufficient: X workers can complete in Y months."
"""
