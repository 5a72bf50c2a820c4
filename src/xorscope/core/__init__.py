"""
Core Package
Codecs, XOR transforms, frequency scoring and the key breaker

- codecs/: hex and Base64 conversion with strict validation
- xor_transform.py: single-byte, repeating-key and fixed XOR
- scoring.py: English frequency rank scoring
- xor_breaker.py: single-byte solver, key-length estimator, repeating-key breaker
- engine.py: end-to-end workflows
"""
