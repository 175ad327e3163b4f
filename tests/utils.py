from importlib.util import find_spec
import numpy as np
import array_api_compat as api

backends = [api.array_namespace(np.zeros(1))]

if find_spec("dask") is not None:
    import dask.array as da
    backends.append(api.array_namespace(da.zeros(1)))

#import cupy as cp
#backends.append(api.array_namespace(cp.zeros(1)))

def rand_data(*shape: int, seed: int = 0):
    return np.random.default_rng(seed).random(shape)

def to_numpy(array) -> np.ndarray:
    return np.asarray(api.to_device(array, "cpu"))

def spd_matrix(eigvals, seed: int = 0) -> np.ndarray:
    """Symmetric matrix with the given eigenvalues and a random orthogonal eigenbasis."""
    n = len(eigvals)
    q, _ = np.linalg.qr(np.random.default_rng(seed).normal(size=(n, n)))
    return q @ np.diag(eigvals) @ q.T
