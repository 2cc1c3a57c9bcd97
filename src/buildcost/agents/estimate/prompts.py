"""Prompt for the detailed cost and schedule estimate."""

PROMPT_TEMPLATE = """\
Act as an expert chartered surveyor. Estimate construction costs for:

- Type: {project_type}
- Quality: {quality}
- Location: {location}
- Size: {size_sq_ft} sq ft
- Budget Limit: {budget_limit}
- Project Timeline: {timeline_months} months
- Manpower/Workers: {manpower} people

REQUIREMENTS:
1. **Total Cost**: Ensure 'totalEstimatedCost' is a realistic market value. Do not blindly match the budget.

2. **Cost Breakdown (Crucial)**:
   - You MUST include a dedicated line item in 'breakdown' for "Labor & Wages".
   - Use ACCURATE local daily/monthly wage rates for construction workers in {location} for the current year.
   - Calculate this specifically for {manpower} workers over {timeline_months} months.
   - Include relevant categories for {project_type} projects: Materials, Equipment Rental, \
Permits & Licenses, Site Preparation, Foundation, Structural Work, Electrical & Plumbing, \
Finishing, Contingency (5-10%), Transportation, Insurance, and any location-specific costs.
   - Ensure all costs reflect current market rates in {location}.

3. **Cashflow (Crucial)**:
   - The 'cashflow' array MUST have EXACTLY {timeline_months} entries.
   - It must range from Month 1 to Month {timeline_months}.
   - Do not generate 12 months if the timeline is {timeline_months}.

4. **Manpower Feasibility Analysis (CRITICAL for Confidence)**:
   - Calculate Total Man-Days Required for a {size_sq_ft} sq ft {project_type} project of {quality} quality.
   - Calculate Available Man-Days = {manpower} workers x {timeline_months} months x 25 working days/month.
   - If Available Man-Days < Required Man-Days, this severely impacts confidence score (reduce by 30-50 points).
   - Include manpower feasibility assessment in 'confidenceReason'.

5. **Confidence Score Calculation**:
   - Start with base score of 85-95 for good data availability.
   - Reduce by 10-20 points if location data is uncertain.
   - Reduce by 30-50 points if manpower is insufficient for timeline.
   - Reduce by 15-25 points if budget is unrealistic.

OUTPUT: Return ONLY a valid JSON object with this structure:
{{
  "currencySymbol": "string",
  "totalEstimatedCost": number,
  "breakdown": [ {{ "category": "string", "cost": number, "description": "string" }} ],
  "cashflow": [ {{ "month": number, "amount": number, "phase": "string" }} ],
  "risks": [ {{ "risk": "string", "impact": "Low"|"Medium"|"High", "mitigation": "string" }} ],
  "confidenceScore": number,
  "confidenceReason": "string",
  "efficiencyTips": ["string"],
  "summary": "string"
}}
"""
