"""
API Package — FastAPI Router • Response Models • Param Parsing • Summarizer
===========================================================================

Contents
--------
- fast_api
    FastAPI router mounted at ``/api/feedback``:
      • ``GET ""`` — filtered list (days, sentiment, source, limit)
      • ``GET /timeseries`` — per-day sentiment counts, optionally grouped by date
      • ``GET /summary`` — chat-model summary of recent feedback
      • ``POST /seed`` — atomic replace with the demo dataset

- models
    Pydantic response contracts: FeedbackRecord, TimeseriesPoint,
    TimeseriesBucket, SummaryResponse, SeedResult.

- utils
    Lenient query-parameter parsing (integers with defaults, closed enums).

- summarizer
    Prompt template and the `ChatOpenAI` wrapper used for summaries.
"""
