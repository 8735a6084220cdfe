from cnfcyk.tests.testrunner import TestRunner, TestRunnerConfiguration
