"""
ui5-deployer - Deploy UI5 projects to remote systems

A command-line interface that reads a project's ui5.yaml, resolves the
configured deployer type and hands it the project's deployable resources.
"""
import argparse
import sys

__version__ = "1.0.0"


def main():
    """Main CLI entry point"""
    from ui5_deployer.commands import deploy, types

    parser = argparse.ArgumentParser(
        prog='ui5-deployer',
        description='ui5-deployer: Deploy UI5 projects to remote systems',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  ui5-deployer deploy                                # Deploy using ./ui5.yaml
  ui5-deployer deploy --transport-request K900123    # Record in transport
  ui5-deployer deploy --config ui5-deploy.yaml -v    # Custom config, verbose
  ui5-deployer types                                 # Show deployer types

Credentials default to $UI5_DEPLOYER_USERNAME / $UI5_DEPLOYER_PASSWORD.
        '''
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='command', help='Command to execute')

    # Deploy command
    deploy_parser = subparsers.add_parser('deploy', help='Deploy the project')
    deploy.setup_parser(deploy_parser)

    # Types command
    types_parser = subparsers.add_parser('types', help='List registered deployer types')
    types.setup_parser(types_parser)

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    # Dispatch to command handler
    try:
        if args.command == 'deploy':
            sys.exit(deploy.execute(args))
        elif args.command == 'types':
            sys.exit(types.execute(args))
    except KeyboardInterrupt:
        print("\n\nInterrupted by user")
        sys.exit(130)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        sys.exit(1)
