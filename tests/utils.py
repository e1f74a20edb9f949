import numpy as np
import array_api_compat as api

backends = [api.array_namespace(np.zeros(1))]

#import torch as tr
#tr.set_default_dtype(tr.float64)
#backends.append(api.array_namespace(tr.zeros(1)))

#import cupy as cp
#backends.append(api.array_namespace(cp.zeros(1)))

dtypes = ["float64", "complex128"]

def rand_data(xp, *shape: int, dtype: str = "float64"):
    data = np.random.rand(*shape)
    if dtype.startswith("complex"):
        data = data + 1j*np.random.rand(*shape)
    data = data.astype(dtype)
    if api.is_cupy_namespace(xp):
        return xp.asarray(data)
    elif api.is_torch_namespace(xp):
        return xp.asarray(data)
    else:
        return data

def locked_basis(xp, nrows: int, ncols: int, skip: int, dtype: str = "float64"):
    """Random basis, whose first skip columns are orthonormal."""
    basis = rand_data(xp, nrows, ncols, dtype=dtype)
    if skip > 0:
        q, _ = xp.linalg.qr(basis[:, :skip], mode='reduced')
        basis[:, :skip] = q
    return basis

def lauchli(xp, delta: float = 1e-8):
    """Nearly rank deficient basis, on which classical Gram-Schmidt loses orthogonality."""
    data = np.asarray([[1.0, 1.0, 1.0],
                       [delta, 0.0, 0.0],
                       [0.0, delta, 0.0],
                       [0.0, 0.0, delta]])
    return xp.asarray(data)

def triangular(xp):
    """Basis with the columns (1,0,0), (1,1,0) and (1,1,1)."""
    data = np.asarray([[1.0, 1.0, 1.0],
                       [0.0, 1.0, 1.0],
                       [0.0, 0.0, 1.0]])
    return xp.asarray(data)

def copy(xp, basis):
    return xp.asarray(basis, copy=True)
