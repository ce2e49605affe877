import argparse
import unittest

def find_case(suite, test_case):
    for tests in suite:
        if isinstance(tests, unittest.TestSuite):
            found = find_case(tests, test_case)
            if found:
                return found
        elif tests._testMethodName == test_case:
            return tests

    return None

def run_test(test_file: str = None, test_case: str = None):
    loader = unittest.TestLoader()
    start_dir = 'tests'

    if test_file:
        suite = loader.discover(start_dir, pattern=test_file)
    else:
        suite = loader.discover(start_dir)

    if test_case:
        case = find_case(suite, test_case)
        if case is None:
            raise Exception(f'Test case {test_case} not found.')

        suite = unittest.TestSuite()
        suite.addTest(case)

    runner = unittest.TextTestRunner(failfast=True)
    result = runner.run(suite)
    return result.wasSuccessful()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Provide test file, test case, or nothing to run test suite")
    parser.add_argument("--tf", nargs='?', type=str, help="Test file.")
    parser.add_argument("--tc", nargs='?', type=str, help="Test case.")

    args = parser.parse_args()

    if args.tf and args.tc:
        raise Exception('Please provide either a test case or a test file.')

    if args.tf:
        print(f'Test file to be run: {args.tf}')

    if args.tc:
        print(f'Test case to be run: {args.tc}')

    if not run_test(test_file=args.tf, test_case=args.tc):
        raise SystemExit(1)
