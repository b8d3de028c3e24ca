from cv_copilot.pipeline.orchestrator import (
    ApplicationOrchestrator,
    PipelineResult,
    ProcessingError,
    process_application,
)

__all__ = ["ApplicationOrchestrator", "PipelineResult", "ProcessingError", "process_application"]
