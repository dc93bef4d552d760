# compsparse

Compressed sparse matrices (CSR and CSC) and sparse vectors in pure Python.
numpy is used for dense arrays.

## What it offers

- `compsparse.indptr.IndPtr` is a checked index-pointer array. It can be sliced
  along the outer dimension and can iterate over nonzeros. A malformed array
  raises `compsparse.indptr.StructureError`, whose `kind` is a
  `StructureErrorKind`.
- `compsparse.matrix.CsMatrix` and `compsparse.matrix.SparseVector` are
  compressed matrices and vectors. A matrix can be built with `CsMatrix.csr`,
  `CsMatrix.csc`, `CsMatrix.eye` or `CsMatrix.eye_csc`. It can then be:
  - sliced with `slice_outer`,
  - transposed,
  - converted between CSR and CSC with `to_other_storage`,
  - turned into a numpy array with `to_dense`.

  `assign_to_dense` and `assign_vector_to_dense` write nonzeros into existing
  arrays.
- `compsparse.matmul.mul_csr_csr` is the product of two CSR matrices. It is
  built from the `symbolic` and `numeric` passes in `compsparse.smmp`.
- `compsparse.prod` holds sparse/dense and sparse/vector products. It also
  has the dot product of two sparse vectors, `csvec_dot_by_binary_search`.
- `compsparse.trisolve` has in-place lower and upper triangular solves against
  a dense right-hand side, in CSR and CSC storage.
  `compsparse.sparse_trisolve.lsolve_csc_sparse_rhs` solves a lower triangular
  CSC system against a sparse right-hand side. It returns the nonzero pattern
  of the solution.
- `compsparse.linalg.diag_solve` solves a diagonal system in place.
- `compsparse.symmetric.is_symmetric` tests a matrix for symmetry.
- `compsparse.special.tri_mesh_graph_laplacian` builds the graph Laplacian of
  a triangle mesh.
- `compsparse.start` holds strategies that choose a starting vertex among the
  unvisited vertices of a matrix graph: `Next`, `MinimumDegree` and
  `PseudoPeripheral`. Subclass `StartStrategy` to write your own.
- `compsparse.etree.Parents` is the parent array of an elimination tree.

## Installing

```
pip install .
```

## Example

```python
from compsparse.matrix import CsMatrix
from compsparse.matmul import mul_csr_csr
from compsparse.trisolve import lsolve_csr_dense_rhs
from compsparse.start import PseudoPeripheral

a = CsMatrix.csr((3, 3), [0, 1, 2, 4], [0, 1, 0, 2], [1, 2, 1, 1])

x = [3, 2, 4]
lsolve_csr_dense_rhs(a, x)          # x is now [3, 1, 1]

product = mul_csr_csr(a, a)
print(product.to_dense())

eye = CsMatrix.eye(3)
start = PseudoPeripheral().find_start_vertex([False] * 3, eye.degrees(), eye)
```

A triangular solve raises `compsparse.trisolve.SingularMatrixError` when a
diagonal element is zero. The error carries the `index` of that element and
the `reason`.

## What it does not do

- There is no permutation-matrix type.
- There is no symmetric permutation P·A·Pᵀ.
- There is no complete bandwidth-reducing (Cuthill-McKee) ordering. The
  starting-vertex strategies in `compsparse.start` are provided on their own.
- Matrix products run in a single thread.
- Matrices cannot be saved to or loaded from files.

## Running the tests

```
pip install .[test]
pytest
```