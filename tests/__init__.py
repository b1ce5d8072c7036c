"""
Test suite for matrix-transforms

One module per component:
- test_math_utils.py : Vector3 and IEEE division helper
- test_matrix.py     : generic SquareMatrix algorithm and Matrix2x2
- test_matrix3x3.py  : 2D builders and post-multiplying helpers
- test_matrix4x4.py  : 3D builders, projections, look-at, pre-multiplying helpers
- test_camera.py     : Camera and CameraConfig
- test_cli.py        : command line entry point
"""
