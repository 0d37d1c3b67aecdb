"""
tablesplit - Test Suite

Test modules organized by functionality:
- unit/segmentation/ - Reader, segmenter, projector, models, pipeline, CLI tests
- unit/ - Configuration and dead letter queue tests
"""
