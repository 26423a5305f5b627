from .process_asset import PipelineCoordinator, ProcessingEstimate, ProcessRequest

__all__ = ["PipelineCoordinator", "ProcessRequest", "ProcessingEstimate"]
