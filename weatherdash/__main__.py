from weatherdash.cli import main

raise SystemExit(main())
