"""
Prompt template for the match prediction request.

The prompt embeds the standings JSON and the fixtures block verbatim, explains
the table abbreviations, and pins the expected JSON output shape.
"""

from __future__ import annotations

PROMPT_TEMPLATE = """Use this example football league table.
{standings}

Table headers are:
MP means Matches Played
W means number of wins
D means number of draws
L means number of losses
F means goals scored
A means goals conceded
GD is the goals difference
P is the number of points
form is the results of the most recent matches (W win, D draw, L loss)

Assume that these are the fixtures:

{fixtures}

Act like a professional football match predictor and analyse these fixtures.
For each match provide
- A potential score
- 90 minute result Win/Draw/Lose
- Over or Under 2.5 goals
- Both teams to score Yes/No
- Probability of each of these predictions happening separately, as a number from 0 to 100

Print in JSON format as shown in the example below:
{example}"""

OUTPUT_EXAMPLE = """{
  "predictions": [
    {
      "match": "Team A v Team B",
      "potentialScore": "2-1",
      "result": {
        "prediction": "Team A Win",
        "probability": 65,
        "analysis": "Analysis here"
      },
      "overUnder": {
        "prediction": "Over 2.5 Goals",
        "probability": 60,
        "analysis": "Analysis here"
      },
      "bothTeamsToScore": {
        "prediction": "Yes",
        "probability": 75,
        "analysis": "Analysis here"
      }
    }
  ]
}"""


def generate_prompt(standings_json: str, fixtures: str) -> str:
    """
    Build the prediction prompt.

    Parameters
    ----------
    standings_json : str
        Formatted standings serialized as indented JSON.
    fixtures : str
        Newline-separated "Home - Away" lines (may be empty).

    Returns
    -------
    str
        The full prompt text.
    """
    return PROMPT_TEMPLATE.format(
        standings=standings_json, fixtures=fixtures, example=OUTPUT_EXAMPLE
    )
