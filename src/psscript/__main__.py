from psscript.cli import main

raise SystemExit(main())
