"""Deploy project command"""
import asyncio

from ui5_deployer.core import (
    configure_logging,
    ConsoleLogger,
    RealFileSystemService,
    SystemEnvironmentProvider,
    YamlConfigLoader,
)
from ui5_deployer.deploy import DeployError, create_default_deployer
from ui5_deployer.deploy.deployer import LOGGER_NAMESPACE
from ui5_deployer.utils.config import DEFAULT_CONFIG_PATH, load_project_descriptor, resolve_credential

USERNAME_ENV = 'UI5_DEPLOYER_USERNAME'
PASSWORD_ENV = 'UI5_DEPLOYER_PASSWORD'


def setup_parser(parser):
    """Setup argument parser for deploy command"""
    parser.add_argument(
        '--config',
        default=DEFAULT_CONFIG_PATH,
        help=f'Path to project configuration file (default: {DEFAULT_CONFIG_PATH})'
    )
    parser.add_argument(
        '--transport-request',
        help='ABAP transport request to record the deploy in'
    )
    parser.add_argument(
        '--username',
        help=f'Username for the target system (default: ${USERNAME_ENV})'
    )
    parser.add_argument(
        '--password',
        help=f'Password for the target system (default: ${PASSWORD_ENV})'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Show verbose deploy output'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Show debug output (implies --verbose)'
    )


def execute(args, deployer=None, env_provider=None, config_loader=None):
    """Execute deploy command"""
    configure_logging(verbose=args.verbose, debug=getattr(args, 'debug', False))

    env_provider = env_provider or SystemEnvironmentProvider()
    config_loader = config_loader or YamlConfigLoader(RealFileSystemService())
    deployer = deployer or create_default_deployer(ConsoleLogger(LOGGER_NAMESPACE))

    try:
        tree = load_project_descriptor(args.config, config_loader)
    except FileNotFoundError:
        print(f"Error: Configuration file not found: {args.config}")
        print("  Run from the project root or pass --config <path>")
        return 1
    except DeployError as e:
        print(f"Error: {e}")
        return 1

    username = resolve_credential(args.username, USERNAME_ENV, env_provider)
    password = resolve_credential(args.password, PASSWORD_ENV, env_provider)

    try:
        asyncio.run(deployer.deploy(
            tree,
            transport_request=args.transport_request,
            username=username,
            password=password
        ))
    except DeployError:
        # Already logged with elapsed time by the dispatcher
        return 1

    return 0
