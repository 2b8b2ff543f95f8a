import logging

import onnxruntime as ort

logger = logging.getLogger(__name__)


def detect_providers():
    """
    Pick execution providers in priority order:
    NVIDIA GPU (CUDA/TensorRT) > Intel/AMD iGPU (DirectML) > CPU
    """
    available = ort.get_available_providers()
    providers = []
    device_name = "CPU Only"

    if "CUDAExecutionProvider" in available:
        providers.append(
            (
                "CUDAExecutionProvider",
                {
                    "device_id": 0,
                    "arena_extend_strategy": "kNextPowerOfTwo",
                    "gpu_mem_limit": 2 * 1024 * 1024 * 1024,
                },
            )
        )
        device_name = "NVIDIA GPU (CUDA)"
        if "TensorrtExecutionProvider" in available:
            providers.append(("TensorrtExecutionProvider", {"device_id": 0}))
            device_name = "NVIDIA GPU (CUDA + TensorRT)"

    elif "DmlExecutionProvider" in available:
        providers.append(("DmlExecutionProvider", {"device_id": 0}))
        device_name = "Intel/AMD iGPU (DirectML)"

    # Always add CPU fallback
    providers.append(
        (
            "CPUExecutionProvider",
            {
                "arena_extend_strategy": "kSameAsRequested",
            },
        )
    )

    logger.debug(f"Execution provider auto-detection: {device_name}")
    return providers


OPTIMIZED_PROVIDERS = detect_providers()

# Inference calls are already serialized per session and spread over the
# worker pool, so each run uses a single sequential executor.
OPTIMIZED_SESSION_OPTIONS = {
    "enable_cpu_mem_arena": True,
    "enable_mem_pattern": True,
    "enable_profiling": False,
    "execution_mode": ort.ExecutionMode.ORT_SEQUENTIAL,
    "graph_optimization_level": ort.GraphOptimizationLevel.ORT_ENABLE_ALL,
    "inter_op_num_threads": 0,
    "intra_op_num_threads": 0,
    "log_severity_level": 3,
}
