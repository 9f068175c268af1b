TEST_SECRET = "test-secret-key-with-at-least-32-bytes!"
