"""List registered deployer types command"""
from ui5_deployer.deploy import registry


def setup_parser(parser):
    """Setup argument parser for types command"""
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Show implementation of each type'
    )


def execute(args, repository=None):
    """Execute types command"""
    repository = repository or registry.default_repository
    names = repository.list_types()

    if not names:
        print("No deployer types registered.")
        return 0

    print("Registered deployer types:")
    for name in names:
        if args.verbose:
            deployer_type = repository.get_type(name)
            impl = type(deployer_type)
            print(f"  {name:<20} {impl.__module__}.{impl.__qualname__}")
        else:
            print(f"  {name}")

    return 0
