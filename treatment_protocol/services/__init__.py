"""Treatment protocol services.

- recommendation_engine: pure composite scoring and banding
- intake: the form that turns raw field text into an AssessmentInput
- export_service: PDF summary rendering and sharing
"""
