from blockstr.cli import main

raise SystemExit(main())
