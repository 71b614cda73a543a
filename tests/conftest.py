from pathlib import Path
from typing import Optional, Sequence

import numpy as np
import onnx
import pytest
from onnx import TensorProto, helper, numpy_helper

# 3 -> 2 linear layer: y = x @ W + b
WEIGHTS = np.array([[1.0, 0.0], [0.0, 1.0], [1.0, 1.0]], dtype=np.float32)
BIAS = np.array([0.5, -0.5], dtype=np.float32)


def write_linear_model(
    path: Path,
    *,
    input_dims: Optional[Sequence] = None,
    extra_relu_output: bool = False,
) -> Path:
    """
    Write a tiny ONNX graph X -> MatMul(W) -> Add(b) -> Y.

    input_dims defaults to ["batch", 3]; pass a symbolic last dim to skip the
    width check done before the runtime is called. With extra_relu_output the
    graph also returns Relu(Y) as a second output "Z".
    """
    input_dims = list(input_dims or ["batch", WEIGHTS.shape[0]])

    nodes = [
        helper.make_node("MatMul", ["X", "W"], ["XW"]),
        helper.make_node("Add", ["XW", "B"], ["Y"]),
    ]
    outputs = [helper.make_tensor_value_info("Y", TensorProto.FLOAT, ["batch", WEIGHTS.shape[1]])]

    if extra_relu_output:
        nodes.append(helper.make_node("Relu", ["Y"], ["Z"]))
        outputs.append(helper.make_tensor_value_info("Z", TensorProto.FLOAT, ["batch", WEIGHTS.shape[1]]))

    graph = helper.make_graph(
        nodes,
        "linear",
        [helper.make_tensor_value_info("X", TensorProto.FLOAT, input_dims)],
        outputs,
        initializer=[
            numpy_helper.from_array(WEIGHTS, name="W"),
            numpy_helper.from_array(BIAS, name="B"),
        ],
    )
    model = helper.make_model(graph, opset_imports=[helper.make_opsetid("", 13)])
    # Older onnxruntime builds reject the newest IR versions
    model.ir_version = 8
    onnx.checker.check_model(model)

    path.parent.mkdir(parents=True, exist_ok=True)
    onnx.save(model, str(path))
    return path


@pytest.fixture
def linear_model_path(tmp_path) -> Path:
    return write_linear_model(tmp_path / "model.onnx")


@pytest.fixture
def two_output_model_path(tmp_path) -> Path:
    return write_linear_model(tmp_path / "two_outputs.onnx", extra_relu_output=True)


@pytest.fixture
def symbolic_width_model_path(tmp_path) -> Path:
    return write_linear_model(tmp_path / "symbolic.onnx", input_dims=["batch", "n"])
